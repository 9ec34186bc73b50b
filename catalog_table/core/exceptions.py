class CatalogTableError(Exception):
    """Base exception for all catalog_table errors"""
    pass

class ConfigError(CatalogTableError):
    """Invalid or inconsistent global.json or seed file location"""
    pass

class RecordSchemaError(CatalogTableError):
    """
    A seed row doesn't match what Record expects
    missing fields, wrong types, etc
    """
    pass
