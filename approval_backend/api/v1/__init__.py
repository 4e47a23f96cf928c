from .auth_controller import router as auth_router
from .admin_controller import router as admin_router


__all__ = ["auth_router", "admin_router"]
