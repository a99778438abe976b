from dataclasses import dataclass, fields
from typing import Dict, Optional

from ..constants import UserFields


# Dataclass attribute -> document/JSON field name
_FILTER_KEYS = {
    "email": UserFields.EMAIL,
    "country": UserFields.COUNTRY,
    "nickname": UserFields.NICKNAME,
    "last_name": UserFields.LAST_NAME,
    "first_name": UserFields.FIRST_NAME,
}


@dataclass
class UserFilter:
    """Sparse set of equality predicates for listing users; None or "" means absent"""
    email: Optional[str] = None
    country: Optional[str] = None
    nickname: Optional[str] = None
    last_name: Optional[str] = None
    first_name: Optional[str] = None

    def predicates(self) -> Dict[str, str]:
        """Populated fields keyed by their document/JSON field name"""
        return {
            _FILTER_KEYS[f.name]: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name)
        }
