from .engine import SupplierRegistry, get_suppliers, init, init_from_settings, register_supplier

__all__ = [
    "SupplierRegistry",
    "get_suppliers",
    "init",
    "init_from_settings",
    "register_supplier",
]
