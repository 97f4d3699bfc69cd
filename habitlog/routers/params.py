"""Path parameters shared by the domain routers."""
from typing import Annotated

from fastapi import Path

from habitlog.schemas.common import MAX_INT32

EntryId = Annotated[int, Path(ge=1, le=MAX_INT32, description="Id of the entry.")]
