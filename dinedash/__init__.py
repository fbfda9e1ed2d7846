"""
DineDash catalog backend: vendors, firms, products and their images.

This package contains the FastAPI app entry point (main.py), API routes,
the Vendor/Firm/Product catalog domain, and infrastructure (MongoDB,
image staging, Cloudinary transcoding).
"""
