"""Constants for Product model field names"""


class ProductFields:
    """Field name constants for Product model"""
    FIRM_ID = "firm_id"
    PRODUCT_NAME = "product_name"
    PRICE = "price"
    CATEGORY = "category"
    BESTSELLER = "bestseller"
    DESCRIPTION = "description"
    IMAGE_URL = "image_url"
    
    # MongoDB specific
    MONGO_ID = "_id"
