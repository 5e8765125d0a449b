"""Image models."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ImageRecord(BaseModel):
    """Locally stored Docker image."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="Id", description="Image ID")
    repo_tags: list[str] = Field(..., alias="RepoTags", description="repository:tag names")
    repo_digests: list[str] = Field(..., alias="RepoDigests", description="Repository digests")
    created: int = Field(..., alias="Created", description="Creation time (epoch seconds)")
    size: int = Field(..., alias="Size", description="Size in bytes")
    virtual_size: int = Field(..., alias="VirtualSize", description="Virtual size in bytes")
    shared_size: int = Field(
        -1, alias="SharedSize", description="Shared size in bytes, -1 if not computed"
    )
    labels: Optional[dict[str, str]] = Field(None, alias="Labels", description="Image labels")
    containers: int = Field(
        -1, alias="Containers", description="Containers using the image, -1 if not computed"
    )
