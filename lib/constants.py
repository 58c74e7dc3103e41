"""
Configuration constants for the nginx allowlist sync.

Provider endpoints can be overridden from the environment or a .env file in
the project root.
"""
import os

from dotenv import load_dotenv

# Load .env file from project root
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
load_dotenv(os.path.join(PROJECT_ROOT, ".env"))

# Provider endpoints
GCORE_URL = os.getenv("GCORE_URL", "https://api.gcore.com/cdn/public-ip-list")
CLOUDFLARE_V4_URL = os.getenv("CLOUDFLARE_V4_URL", "https://www.cloudflare.com/ips-v4")
CLOUDFLARE_V6_URL = os.getenv("CLOUDFLARE_V6_URL", "https://www.cloudflare.com/ips-v6")

# Output defaults
DEFAULT_LOCATION = "/etc/nginx/conf.d"
DEFAULT_FILENAME = "allow.conf"
DEFAULT_HOUR = 3  # Local time
FILE_MODE = 0o644

# Rendered document
HEADER_COMMENT = "# NGINX IP Whitelist"

# Reverse proxy
RELOAD_COMMAND = ["nginx", "-s", "reload"]

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
