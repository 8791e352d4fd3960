#!/usr/bin/env python3
"""
Command-line entry point: queue the largest non-HEVC Radarr movies for transcoding.

Exit codes:
    0 - every selected movie was scheduled (or dry-run)
    1 - a submission failed or was not recognized, or the run was aborted
    2 - missing or invalid configuration
"""
import argparse
import sys

import radarr_transcode as package
from radarr_transcode.catalog import RadarrClient
from radarr_transcode.config import TriageConfig
from radarr_transcode.errors import ConfigurationError, TriageError
from radarr_transcode.pipeline import TriagePipeline
from radarr_transcode.queue import TranscoderClient
from radarr_transcode.utils import LogLevel, constants, logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find the largest movies in Radarr that are not yet HEVC and add them "
                    "to the transcoder job queue, one at a time.",
        epilog="Example: radarr-transcode -k KEY -u http://radarr:7878 "
               "--transcoder-url http://transcoder:8080 --transcoder-token TOKEN --movies 5",
    )
    parser.add_argument("-k", "--api-key", default=constants.RADARR_API_KEY,
                        help="Radarr API key (default: $RADARR_API_KEY)")
    parser.add_argument("-u", "--url", default=constants.RADARR_URL,
                        help="Radarr server URL (default: $RADARR_URL)")
    parser.add_argument("--movies", type=int, default=constants.DEFAULT_MOVIE_COUNT,
                        help="Number of movies to process (default: %(default)s)")
    parser.add_argument("--transcoder-url", default=constants.TRANSCODER_URL,
                        help="Transcoder server URL (default: $TRANSCODER_URL)")
    parser.add_argument("--transcoder-token", default=constants.TRANSCODER_TOKEN,
                        help="Transcoder web server token (default: $TRANSCODER_TOKEN)")
    parser.add_argument("--timeout", type=float,
                        help="Network timeout in seconds for Radarr and the transcoder "
                             f"(default: $TRIAGE_TIMEOUT or {constants.REQUEST_TIMEOUT:g})")
    parser.add_argument("--dry-run", action="store_true",
                        help="Show the selected movies without adding them to the transcoder queue")
    parser.add_argument("--debug", action="store_true", help="Enable debug output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {package.__version__}")
    return parser


def run(config: TriageConfig) -> int:
    """Run the pipeline for a validated configuration and return the exit code."""
    catalog = RadarrClient(config.radarr_url, config.radarr_api_key, timeout=config.timeout)
    transcoder = None
    if not config.dry_run:
        transcoder = TranscoderClient(config.transcoder_url, config.transcoder_token, timeout=config.timeout)

    pipeline = TriagePipeline(catalog, transcoder, limit=config.movies, dry_run=config.dry_run)
    try:
        summary = pipeline.run()
    except TriageError as e:
        logger.log("run.aborted", LogLevel.ERROR, state=pipeline.state.value, error=str(e))
        return 1

    return 0 if summary.succeeded else 1


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    config = TriageConfig(
        radarr_api_key=args.api_key,
        radarr_url=args.url,
        transcoder_url=args.transcoder_url,
        transcoder_token=args.transcoder_token,
        movies=args.movies,
        timeout=args.timeout,
        dry_run=args.dry_run,
        debug=args.debug,
    )
    try:
        config.validate()
    except ConfigurationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    if config.debug:
        logger.set_log_level(LogLevel.DEBUG)

    return run(config)


if __name__ == "__main__":
    sys.exit(main())
