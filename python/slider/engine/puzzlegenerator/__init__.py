from slider.engine.puzzlegenerator.generator import BoardGenerator

__all__ = ["BoardGenerator"]
