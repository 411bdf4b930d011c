from pydantic import BaseModel, ConfigDict, Field


class RemovedElements(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    examples: int = 0
    descriptions: int = 0
    summaries: int = 0
    tags: int = 0
    deprecated_paths: int = Field(default=0, alias="deprecatedPaths")
    extracted_responses: int = Field(default=0, alias="extractedResponses")
    extracted_schemas: int = Field(default=0, alias="extractedSchemas")
    unused_schemas: int = Field(default=0, alias="unusedSchemas")


class MinificationStats(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    original_size: int = Field(default=0, alias="originalSize")
    minified_size: int = Field(default=0, alias="minifiedSize")
    reduction_percentage: float = Field(default=0.0, alias="reductionPercentage")
    removed_elements: RemovedElements = Field(default_factory=RemovedElements, alias="removedElements")

    @staticmethod
    def compute_reduction(original_size: int, minified_size: int) -> float:
        if original_size == 0:
            return 0.0
        return (original_size - minified_size) / original_size * 100


class MinifyResult(BaseModel):
    """Serialized document plus the statistics of the run that produced it."""

    minified_content: str
    stats: MinificationStats
