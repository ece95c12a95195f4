from app.router.api.users import router as users_router
from app.router.api.completions import router as completions_router
__all__ = [
    "users_router",
    "completions_router",
]
