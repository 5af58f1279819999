# 정수 id 발급용 카운터 (Beanie Document)
# - 컬렉션(users, posts)마다 문서 하나
# - $inc + upsert 로 원자적으로 다음 값을 가져옵니다

from beanie import Document
from pymongo import ReturnDocument


class Counter(Document):
    id: str
    seq: int = 0

    class Settings:
        name = "counters"


async def next_sequence(name: str) -> int:
    doc = await Counter.get_motor_collection().find_one_and_update(
        {"_id": name},
        {"$inc": {"seq": 1}},
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )
    return doc["seq"]
