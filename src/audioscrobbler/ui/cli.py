"""
audioscrobbler CLI Module
Command-line front end for browsing Audioscrobbler relationship feeds.
"""

import argparse
from typing import List, Optional

from ..client import Audioscrobbler
from ..core.config import PROJECT_NAME, PROJECT_VERSION, ServiceConfig
from ..core.exceptions import AudioscrobblerError
from ..core.logger import get_logger, setup_logging
from ..core.validation import validate_and_raise
from .display import DisplayManager

logger = get_logger("ui.cli")

RELATIONSHIPS = {
    "artist": ["tracks", "tags", "similar"],
    "track": ["tags", "artists"],
    "tag": ["tracks", "artists"],
    "user": ["tracks", "artists", "tags", "neighbours", "friends"],
}


class AudioscrobblerCLI:
    """Main CLI class for the audioscrobbler feed browser."""

    def __init__(self, client: Optional[Audioscrobbler] = None, display_manager: Optional[DisplayManager] = None):
        self.client = client
        self.display_manager = display_manager or DisplayManager()

    def create_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser."""
        parser = argparse.ArgumentParser(
            prog=PROJECT_NAME,
            description=f"{PROJECT_NAME} v{PROJECT_VERSION} - browse Audioscrobbler feeds",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  %(prog)s artist "Metallica" similar --threshold 50
  %(prog)s track "Metallica" "One" tags
  %(prog)s tag "thrash metal" tracks
  %(prog)s user "RJ" neighbours
            """
        )

        parser.add_argument(
            '--version',
            action='version',
            version=f'{PROJECT_NAME} {PROJECT_VERSION}'
        )
        parser.add_argument(
            '--base-url',
            help='Override the web service root URL'
        )
        parser.add_argument(
            '--log-level',
            default=None,
            help='Logging level (DEBUG, INFO, WARNING, ERROR)'
        )
        parser.add_argument(
            '--limit', '-n',
            type=int,
            help='Maximum number of rows to display'
        )

        subparsers = parser.add_subparsers(
            dest='mode',
            help='Entity type to query',
            required=True
        )

        artist_parser = subparsers.add_parser('artist', help='Artist feeds')
        artist_parser.add_argument('name', help='Artist name')
        self._add_relationship_args(artist_parser, 'artist')

        track_parser = subparsers.add_parser('track', help='Track feeds')
        track_parser.add_argument('artist', help='Artist name')
        track_parser.add_argument('name', help='Track title')
        self._add_relationship_args(track_parser, 'track')

        tag_parser = subparsers.add_parser('tag', help='Tag feeds')
        tag_parser.add_argument('name', help='Tag name')
        self._add_relationship_args(tag_parser, 'tag')

        user_parser = subparsers.add_parser('user', help='User feeds')
        user_parser.add_argument('name', help='User name')
        self._add_relationship_args(user_parser, 'user')

        return parser

    def _add_relationship_args(self, parser: argparse.ArgumentParser, mode: str):
        """Add the relationship choice and the similarity threshold."""
        parser.add_argument(
            'relationship',
            choices=RELATIONSHIPS[mode],
            help='Feed to fetch'
        )
        parser.add_argument(
            '--threshold', '-t',
            type=float,
            help='Minimum similarity (0-100) for similar artists and neighbours'
        )

    def _build_client(self, parsed_args: argparse.Namespace) -> Audioscrobbler:
        if self.client is not None:
            return self.client
        config = ServiceConfig()
        if parsed_args.base_url:
            config = ServiceConfig.from_mapping({"BASE_URL": parsed_args.base_url})
        validate_and_raise(config)
        return Audioscrobbler(config)

    def fetch(self, client: Audioscrobbler, parsed_args: argparse.Namespace) -> list:
        """Resolve the requested entity and fetch the requested relationship."""
        mode = parsed_args.mode
        relationship = parsed_args.relationship

        if mode == 'track':
            entity = client.track(parsed_args.artist, parsed_args.name)
        else:
            entity = getattr(client, mode)(parsed_args.name)

        if relationship == 'similar':
            return entity.similar_artists(parsed_args.threshold)
        if relationship == 'neighbours':
            return entity.neighbours(parsed_args.threshold)
        return getattr(entity, relationship)()

    def run(self, args: List[str] = None) -> int:
        """Run the CLI with given arguments and return the exit status."""
        parser = self.create_parser()
        parsed_args = parser.parse_args(args)

        if parsed_args.log_level:
            setup_logging(parsed_args.log_level)

        try:
            client = self._build_client(parsed_args)
            results = self.fetch(client, parsed_args)
        except KeyboardInterrupt:
            self.display_manager.console.print("\n[yellow]⚠[/yellow] Operation cancelled by user.")
            return 1
        except AudioscrobblerError as e:
            logger.debug(f"{type(e).__name__}: {e}")
            self.display_manager.display_error(str(e))
            return 1

        title = f"{parsed_args.relationship} for {parsed_args.mode} '{parsed_args.name}'"
        self.display_manager.display_entities(results, title, limit=parsed_args.limit)
        return 0
