import structlog
from django.apps import AppConfig

logger = structlog.get_logger(__name__)


class CheckoutConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.checkout"

    def ready(self) -> None:
        from . import gateway

        if not gateway.is_configured():
            logger.warning(
                "checkout.secret_missing",
                message="YOCO_SECRET_KEY is not set. Yoco checkout endpoint will not work correctly.",
            )
