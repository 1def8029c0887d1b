# storefront/services/notification_service.py
from kombu.exceptions import OperationalError

from storefront.celery_worker import celery_app
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class NotificationService:
    """
    Powiadomienia o zlozonym zamowieniu.
    Celery, zeby nie blokowac requestu.
    """

    def send_order_notification(self, user_id: str, order_id: str, order_amount) -> None:
        #zamowienie jest juz zacommitowane, brak brokera nie moze go cofnac
        try:
            send_order_notification_task.delay(user_id, order_id, str(order_amount))
        except OperationalError as e:
            logger.warning(
                "Order notification not dispatched",
                order_id=order_id,
                error=str(e),
            )


@celery_app.task(name="storefront.services.notification_service.send_order_notification_task")
def send_order_notification_task(user_id: str, order_id: str, order_amount: str):
    """
    Celery task - w prawdziwym systemie email/SMS/push.
    Teraz tylko loguje.
    """
    logger.info(f"[NOTIFICATION] User {user_id}: order {order_id} placed, amount {order_amount}")

    return {"user_id": user_id, "order_id": order_id, "order_amount": order_amount, "status": "sent"}
