"""
Main CLI entrypoint for nativeset.

Usage:
    nativeset --version
    nativeset detect [--os NAME --arch ARCH]
    nativeset compose [--profile NAME] [--platform TAG] [--all-platforms]
    nativeset profiles [--library-set PATH]
"""

import argparse
import platform
import sys
from typing import List, Optional

from nativeset import __version__
from nativeset.assembler import DependencyRenderer, assemble, bom_notation
from nativeset.config import ResolverConfig, configure, get_config, set_config
from nativeset.errors import ExitCode, NativeSetError
from nativeset.libraries.composer import compose, compose_many
from nativeset.libraries.loader import load_library_set
from nativeset.platform.detect import resolve
from nativeset.platform.host import capture_host_info, host_platform


def get_version_string() -> str:
    """Generate a detailed version string."""
    host = capture_host_info()
    return (
        f"nativeset {__version__}\n"
        f"  python: {platform.python_version()}\n"
        f"  host: {host.os_name} {host.cpu_arch}"
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for nativeset."""
    parser = argparse.ArgumentParser(
        prog="nativeset",
        description="Resolve the host platform and compose native library dependencies",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  nativeset detect
  nativeset detect --os "Mac OS X" --arch aarch64
  nativeset compose --profile freetype
  nativeset compose --all-platforms --format text
        """,
    )
    
    parser.add_argument(
        "--version",
        action="version",
        version=get_version_string(),
    )
    
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v, -vv)",
    )
    
    subparsers = parser.add_subparsers(dest="command")
    
    detect_parser = subparsers.add_parser(
        "detect",
        help="Print the platform tag of this host",
    )
    detect_parser.add_argument(
        "--os",
        dest="os_name",
        default=None,
        help="OS name to resolve instead of the host's",
    )
    detect_parser.add_argument(
        "--arch",
        dest="cpu_arch",
        default=None,
        help="CPU architecture to resolve instead of the host's",
    )
    
    compose_parser = subparsers.add_parser(
        "compose",
        help="Print the dependencies of a library set profile",
    )
    _add_library_set_argument(compose_parser)
    compose_parser.add_argument(
        "-p", "--profile",
        dest="profile",
        default=None,
        help="Library set profile (default: core)",
    )
    compose_parser.add_argument(
        "--platform",
        dest="platform",
        default=None,
        help="Platform tag or classifier to use instead of detection",
    )
    compose_parser.add_argument(
        "--all-platforms",
        action="store_true",
        help="Include natives for every platform the set bundles",
    )
    compose_parser.add_argument(
        "-f", "--format",
        dest="format",
        choices=DependencyRenderer.FORMATS,
        default=None,
        help="Output format (default: gradle)",
    )
    
    profiles_parser = subparsers.add_parser(
        "profiles",
        help="List the profiles of a library set",
    )
    _add_library_set_argument(profiles_parser)
    
    return parser


def _add_library_set_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-l", "--library-set",
        dest="library_set",
        default=None,
        help="Library set YAML file (default: bundled LWJGL set)",
    )


def _debug(verbose: int, level: int, message: str) -> None:
    if verbose >= level:
        print(f"[nativeset] {message}", file=sys.stderr)


def run_detect(args: argparse.Namespace) -> int:
    """Resolve and print a platform tag."""
    if args.os_name is not None or args.cpu_arch is not None:
        os_name = args.os_name or ""
        cpu_arch = args.cpu_arch or ""
        tag = resolve(os_name, cpu_arch)
    else:
        host = capture_host_info()
        os_name, cpu_arch = host.os_name, host.cpu_arch
        tag = host_platform(get_config().platform_override)
    
    _debug(args.verbose, 1, f"os={os_name!r} arch={cpu_arch!r}")
    print(f"{tag.value} {tag.classifier}")
    return ExitCode.SUCCESS


def run_compose(args: argparse.Namespace) -> int:
    """Compose a library set profile and print its dependencies."""
    overrides = {
        "library_set": args.library_set,
        "profile": args.profile,
        "platform_override": args.platform,
        "output_format": args.format,
        "all_platforms": args.all_platforms,
    }
    configure(**{key: value for key, value in overrides.items() if value})
    config = get_config()
    
    library_set = load_library_set(config.library_set)
    libraries = library_set.profile(config.profile)
    _debug(args.verbose, 1, f"library set: {library_set.source} (profile {config.profile})")
    
    if config.all_platforms:
        tags = library_set.platforms
        _debug(args.verbose, 1, f"platforms: {', '.join(t.value for t in tags)}")
        entries = compose_many(tags, libraries)
    else:
        tag = host_platform(config.platform_override)
        _debug(args.verbose, 1, f"platform: {tag.value}")
        entries = compose(tag, libraries)
    
    for entry in entries:
        _debug(args.verbose, 2, f"{entry.library_name} {entry.kind.value} {entry.classifier or ''}")
    
    coordinates = assemble(entries, library_set)
    renderer = DependencyRenderer()
    output = renderer.render(coordinates, bom_notation(library_set), config.output_format)
    sys.stdout.write(output if output.endswith("\n") else output + "\n")
    return ExitCode.SUCCESS


def run_profiles(args: argparse.Namespace) -> int:
    """List the profiles of a library set."""
    library_set = load_library_set(args.library_set or get_config().library_set)
    for name, members in library_set.profiles.items():
        print(f"{name}: {', '.join(members)}")
    return ExitCode.SUCCESS


def main(args: Optional[List[str]] = None) -> int:
    """Main entrypoint for nativeset CLI."""
    parser = create_parser()
    parsed = parser.parse_args(args)
    
    if parsed.command is None:
        parser.print_help()
        return ExitCode.SUCCESS
    
    set_config(ResolverConfig.from_env())
    
    commands = {
        "detect": run_detect,
        "compose": run_compose,
        "profiles": run_profiles,
    }
    
    try:
        return int(commands[parsed.command](parsed))
    except NativeSetError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return int(e.exit_code)
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return ExitCode.KEYBOARD_INTERRUPT


if __name__ == "__main__":
    sys.exit(main())
