from typing import Sequence
from sqlalchemy.exc import IntegrityError


def is_unique_violation(error: IntegrityError, constraint_name: str, table: str, columns: Sequence[str]) -> bool:
    """
    IntegrityError가 지정한 유일성 제약의 위반으로 발생했는지 판별합니다.

    PostgreSQL 드라이버는 위반한 제약 이름을 diag에 담아 주고, MySQL은 메시지에 제약 이름을 포함합니다.
    SQLite는 제약 이름 없이 "UNIQUE constraint failed: table.col, ..." 형식으로 컬럼만 알려 줍니다.
    """
    orig = error.orig
    diag = getattr(orig, "diag", None)
    diag_name = getattr(diag, "constraint_name", None)
    if diag_name:
        return diag_name == constraint_name

    message = str(orig)
    if constraint_name in message:
        return True
    if "UNIQUE constraint failed" not in message:
        return False
    failed = {name.strip() for name in message.split(":", 1)[1].split(",")}
    return failed == {f"{table}.{column}" for column in columns}
