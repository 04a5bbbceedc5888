import logging
import os
import pathlib
import typing

from .config import Config

log = logging.getLogger(__name__)

ALL_FOLDER = "all"
PRIMARY_TYPE = "primary"
PRIMARY_STEM = "folder"


class ImageNotFound(Exception):

    def __init__(self, name: str, kind: str = "Image"):
        self.name = name
        self.kind = kind
        super().__init__(f"{kind} image not found: {name}")


def first_existing(candidates: typing.Iterable[pathlib.Path]) -> typing.Optional[pathlib.Path]:
    for path in candidates:
        if os.path.isfile(path):
            return path
    return None


class ImageResolver:
    """Maps logical image names onto files below the configured roots.

    Extension order in ``config.supported_image_extensions`` decides which
    file wins when several variants of the same image exist.
    """

    def __init__(self, config: Config):
        self.config = config

    @property
    def extensions(self) -> typing.Tuple[str, ...]:
        return self.config.supported_image_extensions

    def candidates(self, folder: pathlib.Path, stem: str) -> typing.List[pathlib.Path]:
        return [folder / (stem + ext) for ext in self.extensions]

    def resolve_general(self, name: str, image_type: str) -> pathlib.Path:
        """Return the general image for ``name``.

        Never raises: with no file on disk the first candidate is returned as-is
        and whoever streams it reports the miss.
        """
        stem = PRIMARY_STEM if image_type.lower() == PRIMARY_TYPE else image_type
        paths = self.candidates(self.config.general_path / name, stem)

        path = first_existing(paths)
        if path is None:
            log.warning("No general image for %s/%s, falling back to %s", name, image_type, paths[0])
            return paths[0]
        log.debug("Resolved general image %s/%s to %s", name, image_type, path)
        return path

    def resolve_themed(self, root: pathlib.Path, theme: str, name: str, kind: str = "Image") -> pathlib.Path:
        for folder in (root / theme, root / ALL_FOLDER):
            if not os.path.isdir(folder):
                continue
            path = first_existing(self.candidates(folder, name))
            if path is not None:
                if folder.name == ALL_FOLDER and theme != ALL_FOLDER:
                    log.info("Theme %r has no %s image %r, using %s", theme, kind, name, path)
                else:
                    log.debug("Resolved %s image %s/%s to %s", kind, theme, name, path)
                return path

        log.warning("%s image %r not found for theme %r under %s", kind, name, theme, root)
        raise ImageNotFound(name, kind)

    def resolve_rating(self, theme: str, name: str) -> pathlib.Path:
        return self.resolve_themed(self.config.ratings_path, theme, name, kind = "Rating")

    def resolve_media_info(self, theme: str, name: str) -> pathlib.Path:
        return self.resolve_themed(self.config.media_info_images_path, theme, name, kind = "MediaInfo")
