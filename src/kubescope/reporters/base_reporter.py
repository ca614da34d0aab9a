# src/kubescope/reporters/base_reporter.py
"""
Defines the abstract base class for all reporters.
"""
from abc import ABC, abstractmethod

from ..models.snapshot import ClusterSnapshot, NamespaceSnapshot


class BaseReporter(ABC):
    """
    Abstract Base Class for all reporters.
    """

    @abstractmethod
    def report_cluster(self, cluster: ClusterSnapshot):
        pass

    @abstractmethod
    def report_namespace(self, namespace: NamespaceSnapshot):
        """
        Presents the pods of a namespace with their usage and associations.
        """
        pass
