from .image_pipeline import ImagePipeline

__all__ = ["ImagePipeline"]
