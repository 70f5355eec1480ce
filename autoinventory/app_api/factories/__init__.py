from .build_app import build_inventory_app

__all__ = ["build_inventory_app"]
