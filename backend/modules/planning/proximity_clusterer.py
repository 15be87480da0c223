"""
modules/planning/proximity_clusterer.py
-----------------------------------------
Greedy seed-radius grouping of unscheduled places into same-day candidates.

Algorithm (single pass, deterministic for a fixed input order):
  1. Walk the geolocated places in input order.
  2. The first place not yet clustered seeds a new cluster.
  3. Every later unclustered place closer than `radius_km` to the SEED
     joins that cluster.
  4. Clusters are emitted in seed order.

Membership is measured against the seed only, never against other members:
two places 4 km from the seed but 8 km apart share a cluster, and a place
5.01 km from the seed stays out even if it is 100 m from a member.

Places without coordinates are appended to the first cluster, or form a
cluster of their own when no place has coordinates.
"""

from __future__ import annotations

from typing import Optional, Sequence

import config
from schemas.place import Place
from modules.tool_usage.distance_tool import DistanceTool


class ProximityClusterer:
    """Seed-radius clustering over a stable-ordered list of places."""

    def __init__(
        self,
        radius_km: Optional[float] = None,
        distance_tool: Optional[DistanceTool] = None,
    ) -> None:
        self.radius_km: float = (
            radius_km if radius_km is not None else config.SUGGEST_CLUSTER_RADIUS_KM
        )
        self.distance_tool = distance_tool or DistanceTool()

    def cluster(self, places: Sequence[Place]) -> list[list[Place]]:
        """
        Partition `places` into clusters.

        Every input place ends up in exactly one cluster. An empty input
        returns an empty list.
        """
        located = [p for p in places if p.has_coordinates]
        unlocated = [p for p in places if not p.has_coordinates]

        clusters = self._cluster_located(located)

        if unlocated:
            if clusters:
                clusters[0].extend(unlocated)
            else:
                clusters.append(list(unlocated))
        return clusters

    # ── internals ─────────────────────────────────────────────────────────

    def _cluster_located(self, located: list[Place]) -> list[list[Place]]:
        clustered = [False] * len(located)
        clusters: list[list[Place]] = []

        for i, seed in enumerate(located):
            if clustered[i]:
                continue
            clustered[i] = True
            members = [seed]

            for j in range(i + 1, len(located)):
                if clustered[j]:
                    continue
                if self.distance_tool.distance_km(seed, located[j]) < self.radius_km:
                    clustered[j] = True
                    members.append(located[j])

            clusters.append(members)
        return clusters
