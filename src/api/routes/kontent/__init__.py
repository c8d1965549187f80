"""Rotas do webhook Kontent.ai."""

from api.routes.kontent.webhook import router

__all__ = ["router"]
