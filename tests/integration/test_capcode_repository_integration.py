from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Any

import pytest

from capcode.database.repositories.capcode_repository import CapcodeRepository
from capcode.storage.exceptions import StorageError
from capcode.storage.models import Record

RowReader = Callable[[str], list[tuple[Any, ...]]]


@pytest.mark.integration
class TestCapcodeRepositoryPut:
    def test_put_inserts_row(
        self, fetch_rows: RowReader, capcode_table: str, fixed_now: datetime
    ) -> None:
        repo = CapcodeRepository(capcode_table)

        repo.put(Record(transformed_identifier="$argon2id$one", created_at=fixed_now))

        assert fetch_rows(capcode_table) == [("$argon2id$one", fixed_now)]

    def test_put_keeps_duplicate_capcodes(
        self, fetch_rows: RowReader, capcode_table: str, fixed_now: datetime
    ) -> None:
        repo = CapcodeRepository(capcode_table)
        later = fixed_now + timedelta(seconds=1)

        repo.put(Record(transformed_identifier="$argon2id$dup", created_at=fixed_now))
        repo.put(Record(transformed_identifier="$argon2id$dup", created_at=later))

        rows = fetch_rows(capcode_table)
        assert [row[0] for row in rows] == ["$argon2id$dup", "$argon2id$dup"]
        assert rows[0][1] != rows[1][1]

    def test_missing_table_raises_storage_error(
        self, integration_pool: None, fixed_now: datetime
    ) -> None:
        repo = CapcodeRepository("capcodes_missing_table")

        with pytest.raises(StorageError, match="^Failed to save to database: "):
            repo.put(Record(transformed_identifier="$argon2id$x", created_at=fixed_now))
