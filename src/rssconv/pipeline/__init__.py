from .coordinator import ConversionPipeline, PipelineStage, PipelineStats

__all__ = [
    "ConversionPipeline",
    "PipelineStage",
    "PipelineStats",
]
