from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field


class Contact(BaseModel):
    name: Optional[str] = None
    organization: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    country: Optional[str] = None
    phone: Optional[str] = None
    fax: Optional[str] = None
    email: Optional[str] = None

    model_config = {"frozen": True}


class Contacts(BaseModel):
    registrant: Contact = Field(default_factory=Contact)
    administrator: Contact = Field(default_factory=Contact)
    technical: Contact = Field(default_factory=Contact)

    model_config = {"frozen": True}


class Record(BaseModel):
    domain: Optional[str] = None
    raw_text: str = Field(repr=False)
    nameservers: Tuple[str, ...] = ()
    registrar: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None
    contacts: Contacts = Field(default_factory=Contacts)

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "domain": "google.co.uk",
                "nameservers": [
                    "ns1.google.com",
                    "ns2.google.com",
                ],
                "registrar": "Markmonitor Inc. t/a MarkMonitor Inc. [Tag = MARKMONITOR]",
                "created_at": "1999-02-14T00:00:00Z",
                "updated_at": "2018-01-13T00:00:00Z",
                "expires_at": "2019-02-14T00:00:00Z",
                "contacts": {
                    "registrant": {},
                    "administrator": {},
                    "technical": {},
                },
                "raw_text": "Domain name:\n    google.co.uk\n",
            }
        },
    }

    def summary(self) -> Dict[str, Any]:
        """Plain dict view of the record without the raw server response."""
        return self.model_dump(exclude={"raw_text"})

    @property
    def is_empty(self) -> bool:
        data = self.summary()

        def check_empty(v):
            if isinstance(v, dict):
                return all(check_empty(child) for child in v.values())
            if isinstance(v, (list, tuple)):
                return len(v) == 0
            return v is None or v == ""

        return all(check_empty(value) for value in data.values())
