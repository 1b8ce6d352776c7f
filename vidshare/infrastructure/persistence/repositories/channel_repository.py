"""
Implementation en memoire du repository Channel.

Implemente l'interface IChannelRepository avec une table indexee par nom.
"""

from typing import Optional

from vidshare.core.entities import Channel
from vidshare.core.ports.repositories import IChannelRepository


class InMemoryChannelRepository(IChannelRepository):
    """Table des chaines par nom."""

    def __init__(self) -> None:
        self._channels: dict[str, Channel] = {}

    def get_by_name(self, name: str) -> Optional[Channel]:
        return self._channels.get(name)

    def save(self, channel: Channel) -> Channel:
        self._channels[channel.name] = channel
        return channel
