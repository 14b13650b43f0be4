"""Waitlist record handed to a sink."""

from pydantic import BaseModel


class WaitlistEntry(BaseModel):
    timestamp: str
    name: str
    company: str
    email: str

    def as_row(self) -> list[str]:
        return [self.timestamp, self.name, self.company, self.email]
