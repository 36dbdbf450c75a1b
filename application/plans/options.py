from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MIN_NODE_VERSION = "18.17.0"
DEFAULT_NODE_IMAGE = "20"


@dataclass(frozen=True)
class PlanOptions:
    project_name: str = "my-app"
    min_node_version: str = DEFAULT_MIN_NODE_VERSION
    # major version used for the Docker base image and the CI matrix
    node_version: str = DEFAULT_NODE_IMAGE

    def project_values(self) -> dict:
        return {
            "name": self.project_name,
            "node_version": self.node_version,
            "min_node_version": self.min_node_version,
        }
