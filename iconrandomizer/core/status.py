"""Status reply carried by each inbound ping."""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class StatusReply:
    """What the server list shows for this server: name, players and icon."""

    description: str
    version_name: str
    protocol: int
    online_players: int
    max_players: int
    favicon: Optional[str] = None

    def with_favicon(self, favicon):
        return replace(self, favicon=favicon)

    def to_payload(self):
        """Render the reply as the STATUS message body; ``favicon`` only when set."""
        payload = {
            "version": {"name": self.version_name, "protocol": self.protocol},
            "players": {"max": self.max_players, "online": self.online_players},
            "description": {"text": self.description},
        }
        if self.favicon:
            payload["favicon"] = self.favicon
        return payload
