from tf2sku.api.health import router as health_router
from tf2sku.api.sku import router as sku_router

__all__ = [
    "health_router",
    "sku_router",
]
