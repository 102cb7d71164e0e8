#!/usr/bin/env python3
"""
Command-line interface for YouTube Data MCP.

Usage:
  ydm serve
  ydm info "https://youtube.com/watch?v=xxx"
  ydm transcript "https://youtu.be/xxx" --lang ko
  ydm comments --url "https://youtube.com/watch?v=xxx" --sort time --limit 20
  ydm comments --page-token TOKEN
  ydm replies TOKEN

``serve`` speaks MCP on stdin/stdout; every other command runs one tool
and prints the same text the tool would return. Logs go to stderr.
"""

import argparse
import logging
import sys

import yaml

from . import __version__
from .config import load_settings
from .server import call_tool, run_server
from .service import YouTubeDataService


def configure_logging(level: str) -> None:
    """Send log records to stderr; stdout is reserved for tool output."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _print_payload(payload: str) -> int:
    print(payload)
    return 1 if payload.startswith("Error:") else 0


def cmd_serve(service: YouTubeDataService, args) -> int:
    """Run the MCP server on stdio."""
    run_server(service)
    return 0


def cmd_info(service: YouTubeDataService, args) -> int:
    """Print video info."""
    return _print_payload(call_tool(service.get_video_info, url=args.url))


def cmd_transcript(service: YouTubeDataService, args) -> int:
    """Print a transcript."""
    return _print_payload(call_tool(service.get_transcript, url=args.url, lang=args.lang))


def cmd_comments(service: YouTubeDataService, args) -> int:
    """Print one page of comments."""
    return _print_payload(call_tool(
        service.get_comments,
        url=args.url,
        limit=args.limit,
        sort=args.sort,
        page_token=args.page_token,
    ))


def cmd_replies(service: YouTubeDataService, args) -> int:
    """Print one page of replies."""
    return _print_payload(call_tool(service.get_comment_replies, page_token=args.page_token))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='ydm',
        description='YouTube Data MCP - transcripts, video info and comments for MCP agents',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment:
  SERPAPI_KEY          SerpApi key (required for info, comments, replies)
  SERPAPI_BASE_URL     Override the SerpApi endpoint
  YDM_REQUEST_TIMEOUT  HTTP timeout in seconds
  YDM_LOG_LEVEL        Log level (default: INFO)

Examples:
  # Run as an MCP server (for Claude Desktop, etc.)
  ydm serve

  # Newest comments first, 20 per page
  ydm comments --url "https://youtube.com/watch?v=xxx" --sort time --limit 20
        """,
    )

    parser.add_argument('--version', '-v', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--config', '-c', help='YAML/JSON settings file')
    parser.add_argument('--verbose', action='store_true', help='Log debug diagnostics to stderr')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    serve_parser = subparsers.add_parser('serve', help='Run the MCP server on stdio (default)')
    serve_parser.set_defaults(func=cmd_serve)

    info_parser = subparsers.add_parser('info', help='Get basic video information')
    info_parser.add_argument('url', help='YouTube video URL or video ID')
    info_parser.set_defaults(func=cmd_info)

    transcript_parser = subparsers.add_parser('transcript', help='Get a video transcript')
    transcript_parser.add_argument('url', help='YouTube video URL or video ID')
    transcript_parser.add_argument('--lang', default=None, help='Transcript language code (default: en)')
    transcript_parser.set_defaults(func=cmd_transcript)

    comments_parser = subparsers.add_parser('comments', help='Get one page of comments')
    comments_parser.add_argument('--url', help='YouTube video URL or video ID')
    comments_parser.add_argument('--limit', type=int, default=None,
                                 help='Max comments to return (default: 100)')
    comments_parser.add_argument('--sort', choices=['relevance', 'time'], default='relevance',
                                 help='Sort order (default: relevance)')
    comments_parser.add_argument('--page-token', help='nextPageToken from a previous page')
    comments_parser.set_defaults(func=cmd_comments)

    replies_parser = subparsers.add_parser('replies', help='Get replies to a comment')
    replies_parser.add_argument('page_token', help='repliesToken of a comment')
    replies_parser.set_defaults(func=cmd_replies)

    return parser


def main(argv=None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 2

    configure_logging("DEBUG" if args.verbose else settings.log_level)
    log = logging.getLogger(__name__)
    log.debug("Settings: %s", settings.to_dict())
    if not settings.has_credentials:
        log.warning(
            "SERPAPI_KEY is not set; info, comments and replies will fail"
        )

    service = YouTubeDataService(settings)
    func = getattr(args, 'func', cmd_serve)
    return func(service, args)


if __name__ == '__main__':
    sys.exit(main())
