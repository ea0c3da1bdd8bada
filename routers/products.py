# routers/products.py
from models.product import Product, ProductCreate
from routers.crud import crud_router

# image_urls / related_products_ids / specifications are stored as the JSON
# text clients send and decoded by the Product model on the way out.
router = crud_router("products", "products", ProductCreate, Product, "Product")
