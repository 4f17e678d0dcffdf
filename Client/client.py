"""
UCDrive Client - Main Entry Point

This is the main entry point for the UCDrive command-line client.

Author: UCDrive Project
"""

import sys
import argparse


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per operation."""
    parser = argparse.ArgumentParser(
        description='UCDrive - UC cloud drive client',
        epilog='Run "ucdrive login" once to store the account cookie'
    )
    subparsers = parser.add_subparsers(dest='operation', required=True)

    login = subparsers.add_parser('login', help='Store the account cookie in the OS credential store')
    login.add_argument('--cookie', help='Cookie header value (prompted for if omitted)')

    subparsers.add_parser('check', help='Check that the stored cookie is accepted')

    ls = subparsers.add_parser('ls', help='List a folder or show a file')
    ls.add_argument('path', nargs='?', default='/', help='Drive path (default: /)')

    upload = subparsers.add_parser('upload', help='Upload a local file')
    upload.add_argument('local_path', help='Local file to upload')
    upload.add_argument('remote_dir', nargs='?', default='/', help='Destination folder (default: /)')
    upload.add_argument('--name', help='Remote file name (default: local file name)')
    upload.add_argument('--mime-type', help='Content type (default: guessed from the name)')

    link = subparsers.add_parser('link', help='Print a direct download link')
    link.add_argument('path', help='Drive path of a file')

    mkdir = subparsers.add_parser('mkdir', help='Create a folder')
    mkdir.add_argument('path', help='Drive path of the new folder')

    mv = subparsers.add_parser('mv', help='Move an entry into another folder')
    mv.add_argument('src', help='Drive path of the entry')
    mv.add_argument('dst', help='Destination path; its parent folder receives the entry')

    rename = subparsers.add_parser('rename', help='Rename an entry')
    rename.add_argument('src', help='Drive path of the entry')
    rename.add_argument('dst', help='New name or path ending in the new name')

    rm = subparsers.add_parser('rm', help='Delete an entry')
    rm.add_argument('path', help='Drive path of the entry')

    return parser


def main():
    """
    Main entry point for UCDrive client.

    Parses command-line arguments and runs the requested operation.
    """
    args = build_parser().parse_args()

    from cli import run_cli_operation
    return run_cli_operation(args.operation, args)


if __name__ == '__main__':
    sys.exit(main())
