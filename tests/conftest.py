"""
Shared test setup
"""

import os
import tempfile

# main.py loads its config file on import; keep a stray <tmp>/proxy_config
# from leaking into os.environ for the whole session
os.environ["PROXY_CONFIG_FILE"] = os.path.join(
    tempfile.mkdtemp(prefix="proxy-tests-"), "proxy_config"
)
