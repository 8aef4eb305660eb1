from pydantic import BaseModel, ConfigDict, Field


class GenerationResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    site_name: str = Field(alias="siteName")
    output_path: str = Field(alias="outputPath")
    pages_generated: int = Field(alias="pagesGenerated")
    message: str
