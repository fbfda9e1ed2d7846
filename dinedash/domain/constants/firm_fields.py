"""Constants for Firm model field names"""


class FirmFields:
    """Field name constants for Firm model"""
    VENDOR_ID = "vendor_id"
    FIRM_NAME = "firm_name"
    AREA = "area"
    CATEGORY = "category"
    REGION = "region"
    OFFER = "offer"
    IMAGE_URL = "image_url"
    PRODUCT_IDS = "product_ids"
    
    # MongoDB specific
    MONGO_ID = "_id"
