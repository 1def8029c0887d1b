# storefront/services/lock_service.py
import uuid
from contextlib import contextmanager

import redis
from redis.exceptions import RedisError

from storefront.domain.errors import ConflictError
from storefront.utils.retry import redis_retry
from storefront.utils.settings import REDIS_URL, CART_LOCK_TTL_SECONDS
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

#LUA porownaj i usun, atomicity
#nie mozna wcisnac sie miedzy GET a DEL, wiec zwalniamy tylko swoj lock
_RELEASE_LUA = """
if redis.call('GET', KEYS[1]) == ARGV[1] then
    return redis.call('DEL', KEYS[1])
else
    return 0
end
"""


class LockService:
    """
    -lock na koszyk usera na czas read -> write
    -zwalnianie locka tylko przez wlasciciela (token)
    -atomowosc przy pomocy lua
    """

    def __init__(self, url: str | None = None, client: redis.Redis | None = None):
        self.redis = client or redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )

    @staticmethod
    def cart_key(user_id: str) -> str:
        return f"cart:user:{user_id}:lock"

    @redis_retry()
    def acquire_cart_lock(self, user_id: str, token: str, ttl: int) -> bool:
        key = self.cart_key(user_id)
        logger.debug(f"Acquire lock {key}")
        #SET cart:user:42:lock "<token>" NX EX 10
        return bool(
            self.redis.set(
                name=key,
                value=token,
                nx=True,
                ex=ttl,
            )
        )

    @redis_retry()
    def release_cart_lock(self, user_id: str, token: str) -> bool:
        key = self.cart_key(user_id)
        logger.debug(f"Release lock {key}")
        res = self.redis.eval(_RELEASE_LUA, 1, key, token)
        return bool(res)

    @contextmanager
    def hold_cart_lock(self, user_id: str, ttl: int = CART_LOCK_TTL_SECONDS):
        """Hold the user's cart lock for the duration of the block.

        Fails fast with ``ConflictError`` when another request holds it.
        """
        token = uuid.uuid4().hex
        if not self.acquire_cart_lock(user_id, token, ttl):
            logger.warning("Cart lock busy", user_id=user_id)
            raise ConflictError("Cart is being modified by another request")
        try:
            yield
        finally:
            #zapis moze byc juz zacommitowany, lock i tak wygasnie po ttl
            try:
                self.release_cart_lock(user_id, token)
            except RedisError as e:
                logger.warning(
                    "Failed to release cart lock",
                    user_id=user_id,
                    error=str(e),
                )
