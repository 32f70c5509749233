from __future__ import annotations

import logging
from typing import Dict, Optional

from model.elements import AntennaType
from model.graph import WeightedGraph
from .config import NetworkConfig
from .logical import LogicalNetwork, Route, build_backbone

__all__ = ['AntennaOrientation']


class AntennaOrientation:
    """Omnidirectional and directional logical networks over one physical network.

    Both networks share a single backbone (MST) computation.  Range updates
    and resets can target one antenna type or both.
    """

    def __init__(
        self,
        physical: WeightedGraph,
        config: Optional[NetworkConfig] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.cfg = (config or NetworkConfig()).validate()
        self.log = logger or logging.getLogger(__name__)
        self.physical = physical
        self.backbone = build_backbone(physical, self.cfg)
        if not self.backbone.is_spanning_tree:
            self.log.warning("physical network is disconnected; backbone is a spanning forest")
        self.networks: Dict[AntennaType, LogicalNetwork] = {
            t: LogicalNetwork(physical, t, self.cfg, logger=self.log, backbone=self.backbone)
            for t in AntennaType
        }

    # ------------------------------------------------------------------
    @property
    def omni(self) -> LogicalNetwork:
        return self.networks[AntennaType.OMNIDIRECTIONAL]

    @property
    def directional(self) -> LogicalNetwork:
        return self.networks[AntennaType.DIRECTIONAL]

    def logical_network(self, antenna_type: AntennaType) -> LogicalNetwork:
        return self.networks[antenna_type]

    @property
    def backbone_weight(self) -> float:
        return self.backbone.weight

    # ------------------------------------------------------------------
    def update_range(self, new_range: float, antenna_type: Optional[AntennaType] = None) -> None:
        for t, net in self.networks.items():
            if antenna_type is None or t is antenna_type:
                net.update_range(new_range)

    def reset(self, antenna_type: Optional[AntennaType] = None) -> None:
        for t, net in self.networks.items():
            if antenna_type is None or t is antenna_type:
                net.reset()

    def shortest_route(self, from_name: str, to_name: str,
                       antenna_type: AntennaType = AntennaType.DIRECTIONAL) -> Optional[Route]:
        return self.networks[antenna_type].shortest_route(from_name, to_name)

    def summary(self) -> Dict[str, dict]:
        return {t.value: net.summary() for t, net in self.networks.items()}
