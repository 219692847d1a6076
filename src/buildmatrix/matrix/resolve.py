import logging
from typing import Optional, Sequence

from .. import constants
from ..io import FileSystem
from ..datacls import TagEntry, ResolvedBuildTarget
from ..exceptions import BMIOError
from ..rules import Rule, infer_context
from .images import join_path

logger = logging.getLogger(__name__)


class ContextResolver:
    """
    Turns a TagEntry into a ResolvedBuildTarget.

    An explicit relative context is used verbatim; otherwise one is inferred
    from the tag. The Dockerfile is checked exactly once; an error while
    checking counts as "does not exist".
    """

    def __init__(
        self,
        fs: FileSystem,
        version_rules: Optional[Sequence[Rule]] = None,
        distro_rules: Optional[Sequence[Rule]] = None,
    ):
        self.fs = fs
        self.version_rules = version_rules
        self.distro_rules = distro_rules

    def relative_context(self, entry: TagEntry) -> str:
        if not entry.needs_inference:
            return entry.relative_context
        return infer_context(entry.tag, self.version_rules, self.distro_rules)

    def resolve(self, name: str, image_dir: str, entry: TagEntry) -> Optional[ResolvedBuildTarget]:
        """Return the target, or None when its Dockerfile does not exist."""
        # Contexts are always appended to the image directory, even '/x'
        context = join_path(image_dir, self.relative_context(entry).lstrip("/"))
        dockerfile = join_path(context, constants.DOCKERFILE_NAME)

        if not self._dockerfile_exists(dockerfile):
            logger.debug(f"[{name}] No Dockerfile at '{dockerfile}' for tag '{entry.tag}'")
            return None

        logger.debug(f"[{name}] Resolved '{entry.tag}' to '{context}'")
        return ResolvedBuildTarget(name=name, tag=entry.tag, context=context, dockerfile=dockerfile)

    def _dockerfile_exists(self, dockerfile: str) -> bool:
        try:
            return self.fs.is_file(dockerfile)
        except (OSError, BMIOError) as e:
            logger.debug(f"Existence check failed for '{dockerfile}': {e}")
            return False
