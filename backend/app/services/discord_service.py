# backend/app/services/discord_service.py
"""
Servicio de avisos a Discord.

El pago de las solicitudes de compra se completa fuera de la aplicación, en el
servidor de Discord de la tienda. Este servicio publica cada nueva solicitud en
un webhook de Discord para que los administradores la vean en el canal.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from app.core.config import settings

logger = logging.getLogger(__name__)


class DiscordNotifier:
    """
    Cliente mínimo de webhooks de Discord.
    """

    def __init__(self, webhook_url: Optional[str] = None):
        self.webhook_url = webhook_url if webhook_url is not None else settings.discord_webhook_url
        if not self.webhook_url:
            logger.info("Webhook de Discord no configurado, no se enviarán avisos.")

    @property
    def enabled(self) -> bool:
        return bool(self.webhook_url)

    def build_purchase_message(self, purchase_id: str, total_price: float, user_email: str, items: list) -> Dict[str, Any]:
        lines = [f"• {item['quantity']} x {item['name']} ({settings.CURRENCY_SYMBOL}{item['total']:.2f})" for item in items]
        return {
            "content": f"🛒 New purchase request **{purchase_id}**",
            "embeds": [
                {
                    "title": purchase_id,
                    "description": "\n".join(lines),
                    "fields": [
                        {"name": "Customer", "value": user_email, "inline": True},
                        {"name": "Total", "value": f"{settings.CURRENCY_SYMBOL}{total_price:.2f}", "inline": True},
                    ],
                }
            ],
        }

    async def send(self, payload: Dict[str, Any]) -> bool:
        """
        Envía el mensaje al webhook. Devuelve True si Discord lo aceptó.
        Los errores se registran y no se propagan: el aviso nunca debe romper una compra.
        """
        if not self.webhook_url:
            return False
        try:
            async with httpx.AsyncClient(timeout=10.0) as client:
                response = await client.post(self.webhook_url, json=payload)
                response.raise_for_status()
                return True
        except httpx.HTTPStatusError as e:
            logger.error(f"Error HTTP enviando aviso a Discord: {e.response.status_code} - {e.response.text}")
        except httpx.HTTPError as e:
            logger.error(f"Error de red enviando aviso a Discord: {e}")
        return False


discord_notifier = DiscordNotifier()
