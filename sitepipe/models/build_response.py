from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class BuildResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    site_name: str = Field(alias="siteName")
    build_path: str = Field(alias="buildPath")
    status: Literal["SUCCESS"] = "SUCCESS"
    message: str
    build_time_ms: int = Field(alias="buildTimeMs")
    file_count: int = Field(alias="fileCount")


class BuildStatus(BaseModel):
    """Current state of a site's Built Tree.

    A site without a build directory is reported as ``NOT_BUILT`` rather
    than treated as an error.
    """

    model_config = ConfigDict(populate_by_name=True)

    site_name: str = Field(alias="siteName")
    build_path: Optional[str] = Field(default=None, alias="buildPath")
    status: Literal["NOT_BUILT", "BUILT"]
    message: str
    file_count: int = Field(default=0, alias="fileCount")


class SiteListResponse(BaseModel):
    sites: List[str]
    count: int
    message: str
