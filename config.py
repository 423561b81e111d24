"""Application configuration."""
import os

from dotenv import load_dotenv

load_dotenv()

# Collaborator API
API_BASE_URL = os.getenv("KHATASATHI_API_URL", "http://localhost:4000").rstrip("/")
REQUEST_TIMEOUT = float(os.getenv("KHATASATHI_REQUEST_TIMEOUT", "15"))

# Products list
PAGE_SIZE_OPTIONS = [6, 10, 25, 50]
DEFAULT_PAGE_SIZE = 6

ALL_BRANDS = "All Brands"
ALL_CATEGORIES = "All Categories"

# Defaults for a new product draft (used when the catalog has no brands/categories yet)
DEFAULT_BRAND = "CG Foods"
DEFAULT_CATEGORY = "Groceries"
DEFAULT_THRESHOLD_QTY = 1
DEFAULT_LOW_STOCK_THRESHOLD = 5

CURRENCY_PREFIX = "Rs"

# Dashboard
RECENT_INVOICE_DAYS = 7

# App settings
APP_TITLE = "KhataSathi"
APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
APP_PORT = int(os.getenv("PORT", "8080"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
HEALTH_MESSAGE = "KhataSathi API running"
