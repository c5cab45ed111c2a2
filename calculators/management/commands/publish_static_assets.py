import logging
import shutil
from pathlib import Path

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

logger = logging.getLogger(__name__)

PUBLIC_FILES = ("robots.txt", "sitemap.xml", "_redirects")
DEPLOY_CONFIG = "netlify.toml"


class Command(BaseCommand):
    help = "Copy optional deploy files (robots.txt, sitemap.xml, _redirects, netlify.toml) into the publish directory."

    def add_arguments(self, parser):
        parser.add_argument(
            "--source",
            default=str(settings.BASE_DIR),
            help="Directory holding the files to publish (defaults to the project root).",
        )
        parser.add_argument(
            "--publish-dir",
            default=str(settings.PUBLISH_DIR),
            help="Directory the site is published from; the deploy config goes to its parent.",
        )

    def handle(self, *args, **options):
        source = Path(options["source"])
        publish_dir = Path(options["publish_dir"])
        try:
            publish_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise CommandError(f"Cannot create publish directory {publish_dir}: {exc}") from exc

        copied = 0
        for name in PUBLIC_FILES:
            copied += self._copy(source / name, publish_dir / name)
        copied += self._copy(source / DEPLOY_CONFIG, publish_dir.parent / DEPLOY_CONFIG)

        self.stdout.write(self.style.SUCCESS(f"Published {copied} static file(s) to {publish_dir}"))

    def _copy(self, src: Path, dest: Path) -> int:
        if not src.is_file():
            logger.info("%s not found, skipping", src.name)
            return 0
        shutil.copyfile(src, dest)
        logger.info("Copied %s to %s", src.name, dest)
        return 1
