# src/kubescope/api/schemas.py
"""
Pydantic request/response schemas for the API.
Request bodies use the camelCase keys sent by the dashboard frontend.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

from kubescope.models.snapshot import KubeContext


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str = Field(..., description="Health status of the API.")
    version: str = Field(..., description="Current application version.")


class KubeconfigRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    file_path: str = Field(..., alias="filePath", min_length=1, description="Path of an uploaded kubeconfig.")


class ClusterInfoRequest(KubeconfigRequest):
    context_name: str = Field(..., alias="contextName", min_length=1)


class NamespaceDetailsRequest(ClusterInfoRequest):
    namespace_name: str = Field(..., alias="namespaceName", min_length=1)


class SwitchContextResponse(BaseModel):
    success: bool = True


class ContextsResponse(BaseModel):
    success: bool = True
    contexts: List[KubeContext] = Field(default_factory=list)


class ClusterInfoResponse(BaseModel):
    success: bool = True
    cluster: Dict[str, Any] = Field(..., description="Cluster snapshot in dashboard shape.")


class NamespaceDetailsResponse(BaseModel):
    success: bool = True
    namespace: Dict[str, Any] = Field(..., description="Namespace snapshot in dashboard shape.")
