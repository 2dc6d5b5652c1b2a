"""Token parsing for updates given on the command line."""

from typing import Optional

from .models import Single
from .serialization import UpdateFormatError


def parse_update_token(token: str) -> Single:
    """Parse ``groupId:artifactId:currentVersion:newer1,newer2[:configurations]``.

    Newer versions are listed nearest first, so the first one is adopted.
    """
    parts = [part.strip() for part in token.strip().split(":")]
    if len(parts) not in (4, 5) or not all(parts[:4]):
        raise UpdateFormatError(
            f"Invalid update '{token}'. Expected 'groupId:artifactId:current:newer[,newer...]'."
        )
    group_id, artifact_id, current_version, newer = parts[:4]
    newer_versions = tuple(v.strip() for v in newer.split(",") if v.strip())
    if not newer_versions:
        raise UpdateFormatError(f"Invalid update '{token}'. No newer version given.")
    configurations: Optional[str] = parts[4] if len(parts) == 5 and parts[4] else None
    return Single(group_id, artifact_id, current_version, newer_versions, configurations)
