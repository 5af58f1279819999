# 재시도 로직 유틸리티
# 주니어 개발자님께: 앱 시작 시 MongoDB 가 아직 준비되지 않았을 수 있습니다
# (예: docker-compose 에서 DB 컨테이너가 늦게 뜨는 경우).
# 이런 경우 몇 번 재시도하면 연결에 성공할 수 있습니다.
# 요청 처리 중의 저장소 오류는 재시도하지 않고 바로 실패시킵니다.

import logging
from typing import Tuple, Type

from pymongo.errors import ConnectionFailure, ServerSelectionTimeoutError
from tenacity import (
    after_log,
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

logger = logging.getLogger(__name__)


def create_db_retry_decorator(
    max_attempts: int = 3,
    initial_wait: float = 1.0,
    max_wait: float = 10.0,
    exceptions: Tuple[Type[Exception], ...] = (ConnectionFailure, ServerSelectionTimeoutError)
):
    """
    데이터베이스 연결용 재시도 데코레이터를 생성하는 팩토리 함수입니다.

    지수 백오프(Exponential Backoff):
    - 1번째 실패 후: 1초 대기 (initial_wait)
    - 2번째 실패 후: 2초 대기
    - 최대 max_wait 초까지만

    모든 시도가 실패하면 마지막 예외를 그대로 다시 발생시킵니다 (reraise=True).

    사용 예시:
        @create_db_retry_decorator(max_attempts=3)
        async def ping():
            ...
    """
    return retry(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=2, min=initial_wait, max=max_wait),
        retry=retry_if_exception_type(exceptions),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        after=after_log(logger, logging.ERROR),
        reraise=True,
    )
