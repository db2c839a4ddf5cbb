from .experiment import app

__all__ = ["app"]
