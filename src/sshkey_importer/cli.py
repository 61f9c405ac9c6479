"""
Command-line interface for sshkey-importer
Inspects OpenSSH private key files and prints the extracted key material
"""

import argparse
import base64
import logging
import sys
from typing import Optional

from . import __version__
from .config import ImporterConfig, load_config_from_file, load_default_config, configure_logging
from .crypto import verify_key_consistency
from .exceptions import SSHKeyImporterError
from .openssh import ParsedKey, import_key, fingerprint_sha256, fingerprint_md5

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog='sshkey-importer',
        description='Inspect unencrypted OpenSSH private keys (Ed25519, ECDSA P-256/P-384)'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'sshkey-importer {__version__}'
    )

    parser.add_argument(
        '--config',
        help='Path to a JSON configuration file'
    )

    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Override the configured log level'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    setup_inspect_parser(subparsers)
    setup_fingerprint_parser(subparsers)

    return parser


def setup_inspect_parser(subparsers):
    """Setup key inspection subcommand."""
    inspect_parser = subparsers.add_parser('inspect', help='Import a key file and show its contents')
    inspect_parser.add_argument('key_file', help="OpenSSH private key file ('-' for stdin)")
    inspect_parser.add_argument(
        '--format',
        choices=['hex', 'base64'],
        help='Output format for key bytes (default from configuration: hex)'
    )
    inspect_parser.add_argument(
        '--show-private',
        action='store_true',
        help='Also print the private key bytes'
    )
    inspect_parser.add_argument(
        '--verify',
        action='store_true',
        help='Check that the public key matches the private key'
    )


def setup_fingerprint_parser(subparsers):
    """Setup fingerprint subcommand."""
    fingerprint_parser = subparsers.add_parser('fingerprint', help='Print the public key fingerprint')
    fingerprint_parser.add_argument('key_file', help="OpenSSH private key file ('-' for stdin)")
    fingerprint_parser.add_argument(
        '--hash',
        choices=['sha256', 'md5'],
        default='sha256',
        help='Fingerprint hash algorithm (default: sha256)'
    )


def read_key_file(path: str) -> str:
    """Read key file contents, '-' meaning standard input."""
    if path == '-':
        return sys.stdin.read()
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def format_bytes(data: bytes, format_type: str) -> str:
    if format_type == 'base64':
        return base64.b64encode(bytes(data)).decode('ascii')
    return bytes(data).hex()


def load_key(path: str) -> ParsedKey:
    logger.debug("Importing key from %s", path)
    parsed = import_key(read_key_file(path))
    logger.info("Imported %s key from %s", parsed.key_type.value, path)
    return parsed


def handle_inspect_command(args, config: ImporterConfig) -> int:
    """Handle key inspection."""
    key_format = args.format or config.output.key_format
    show_private = args.show_private or config.output.show_private

    with load_key(args.key_file) as parsed:
        print(f"Key Type: {parsed.key_type.value}")
        print(f"Comment: {parsed.comment or 'N/A'}")
        print(f"Fingerprint: {fingerprint_sha256(parsed)}")
        print(f"Public Key: {format_bytes(parsed.public_key_data, key_format)}")

        if show_private:
            print(f"Private Key: {format_bytes(parsed.private_key_data, key_format)}")

        if args.verify:
            consistent = verify_key_consistency(parsed)
            print(f"Key Consistency: {'✓ VERIFIED' if consistent else '✗ MISMATCH'}")
            if not consistent:
                return 1

    return 0


def handle_fingerprint_command(args, config: ImporterConfig) -> int:
    """Handle fingerprint printing."""
    with load_key(args.key_file) as parsed:
        if args.hash == 'md5':
            fingerprint = fingerprint_md5(parsed)
        else:
            fingerprint = fingerprint_sha256(parsed)

        suffix = f" {parsed.comment}" if parsed.comment else ""
        print(f"{fingerprint}{suffix} ({parsed.key_type.value})")

    return 0


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point for the CLI

    Args:
        argv: Command line arguments (None to use sys.argv)

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config_from_file(args.config) if args.config else load_default_config()
        if args.log_level:
            config.logging.level = args.log_level
        configure_logging(config)

        if args.command == 'inspect':
            return handle_inspect_command(args, config)
        elif args.command == 'fingerprint':
            return handle_fingerprint_command(args, config)
        else:
            parser.print_help()
            return 1

    except SSHKeyImporterError as e:
        print(f"Error [{e.error_code}]: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error reading key file: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return 130


if __name__ == '__main__':
    sys.exit(main())
