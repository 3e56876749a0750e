# stock_ledger/constants.py
DATA_DIR = "data"
DB_FILE_NAME = "stock_ledger.db"

# ---------- Tables ----------
TABLE_TENANTS = "tenants"
TABLE_COLLECTIONS = "tenant_collections"

# ---------- Per-tenant collections (storage keys) ----------
COLLECTION_PRODUCTS = "products"
COLLECTION_SUPPLIERS = "suppliers"
COLLECTION_BUYERS = "buyers"
COLLECTION_STOCK = "stock"
COLLECTION_SALES = "sales"

COLLECTIONS: tuple[str, ...] = (
    COLLECTION_PRODUCTS,
    COLLECTION_SUPPLIERS,
    COLLECTION_BUYERS,
    COLLECTION_STOCK,
    COLLECTION_SALES,
)

# ---------- Sales ----------
PAYMENT_MODES: tuple[str, ...] = ("mpesa", "cash", "bank", "debt", "other")

# ---------- Dashboard ----------
LOW_STOCK_THRESHOLD = 5
DASHBOARD_DEFAULT_DAYS = 7
BEST_SELLERS_LIMIT = 3
