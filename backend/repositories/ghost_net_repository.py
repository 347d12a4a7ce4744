# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20260206v1
# ---------------------------------------------------------------------------
"""Data access for the ghost_nets table."""

from models.ghost_net import GhostNet
from repositories.base import Repository


class GhostNetRepository(Repository[GhostNet]):
    model = GhostNet
