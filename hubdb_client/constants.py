# URL templates of the HubDB API, relative to config.HUBSPOT_API_BASE_URL
# `:name` placeholders are filled from the request shape
HUBDB_ENDPOINTS = {
    "tables": "/hubdb/api/v2/tables",
    "table": "/hubdb/api/v2/tables/:tableId",
    "rows": "/hubdb/api/v2/tables/:tableId/rows",
}

TABLE_FIELDS = ("name", "useForPages", "columns", "publishedAt")
