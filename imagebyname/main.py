import asyncio
import logging
import typing

import quart

from . import endpoints
from .config import Config
from .resolver import ImageNotFound, ImageResolver

log = logging.getLogger(__name__)


def create_app(config: typing.Optional[Config] = None) -> quart.Quart:
    config = config or Config()

    app = quart.Quart("imagebyname")
    app.image_config = config
    app.image_resolver = ImageResolver(config)

    for _bp in endpoints.blueprints:
        app.register_blueprint(_bp)

    @app.route("/ping")
    async def ping_page():
        return "pong!"

    @app.route("/endpoints")
    async def endpoints_page():
        listing = []
        for bp in endpoints.blueprints:
            for func in bp.endpoints:
                for rule in app.url_map.iter_rules(f"{bp.name}.{func.__name__}"):
                    listing.append({
                        "route": rule.rule,
                        "description": (func.__doc__ or "").strip(),
                    })
        return quart.jsonify(listing)

    @app.errorhandler(ImageNotFound)
    async def image_not_found(error: ImageNotFound):
        return {"message": str(error)}, 404

    log.debug(
        "Serving general images from %s, ratings from %s, media info from %s (extensions %s)",
        config.general_path,
        config.ratings_path,
        config.media_info_images_path,
        ", ".join(config.supported_image_extensions),
    )
    return app


def run(config: typing.Optional[Config] = None):
    config = config or Config()
    logging.basicConfig(level = config.log_level)
    app = create_app(config)
    log.info("Starting image service on %s:%s", config.host, config.port)
    asyncio.run(app.run_task(
        host = config.host,
        port = config.port,
    ))


if __name__ == "__main__":
    run()
