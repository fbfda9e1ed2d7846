"""Constants for Vendor model field names"""


class VendorFields:
    """Field name constants for Vendor model"""
    USERNAME = "username"
    EMAIL = "email"
    HASHED_PASSWORD = "hashed_password"
    FIRM_IDS = "firm_ids"
    
    # MongoDB specific
    MONGO_ID = "_id"
