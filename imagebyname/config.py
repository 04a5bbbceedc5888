import os
import pathlib
import typing


class Config:
    DEFAULT_DATA_PATH = "data/images"
    DEFAULT_IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg", ".tbn")
    DEFAULT_HOST = "0.0.0.0"
    DEFAULT_PORT = 8096
    DEFAULT_LOG_LEVEL = "INFO"

    def __init__(self, environ: typing.Optional[typing.Mapping[str, str]] = None):
        env = os.environ if environ is None else environ

        data_path = pathlib.Path(env.get("IMAGES_DATA_PATH", self.DEFAULT_DATA_PATH))
        self.general_path = pathlib.Path(
            env.get("IMAGES_GENERAL_PATH", data_path / "general")
        )
        self.ratings_path = pathlib.Path(
            env.get("IMAGES_RATINGS_PATH", data_path / "ratings")
        )
        self.media_info_images_path = pathlib.Path(
            env.get("IMAGES_MEDIAINFO_PATH", data_path / "mediainfo")
        )

        extensions = env.get("IMAGES_EXTENSIONS")
        self.supported_image_extensions: typing.Tuple[str, ...] = (
            parse_extensions(extensions) if extensions else self.DEFAULT_IMAGE_EXTENSIONS
        )

        self.host = env.get("IMAGES_HOST", self.DEFAULT_HOST)
        self.port = int(env.get("IMAGES_PORT", self.DEFAULT_PORT))
        self.log_level = env.get("IMAGES_LOG_LEVEL", self.DEFAULT_LOG_LEVEL).upper()


def parse_extensions(value: str) -> typing.Tuple[str, ...]:
    """Split a comma separated extension list, keeping order and adding missing dots.

    >>> parse_extensions("png, .jpg")
    ('.png', '.jpg')
    """
    extensions = []
    for item in value.split(","):
        item = item.strip()
        if not item:
            continue
        if not item.startswith("."):
            item = "." + item
        if item not in extensions:
            extensions.append(item)
    if not extensions:
        raise ValueError(f"No image extensions in {value!r}")
    return tuple(extensions)
