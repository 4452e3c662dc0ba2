#!/usr/bin/env python3
"""Render an oncostrip PNG from MAF or matrix files."""

from __future__ import annotations

from oncostrip.cli import oncostrip_main


def main() -> int:
    """Script entry point; same arguments as `oncostrip-plot`."""
    return oncostrip_main()


if __name__ == "__main__":
    raise SystemExit(main())
