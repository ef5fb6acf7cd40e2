from .skeleton_reader import SkeletonReader, element_from_tag

__all__ = ["SkeletonReader", "element_from_tag"]
