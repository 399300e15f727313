"""The Command Line Interface for the walkthrough, including Interactive elements.

A hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface) that generates the INTERACTIVE part
on-the-fly based on the arguments missing from the command line, including the option that none are given. The
`session` subcommand keeps one key context alive across several operations, the way a classroom web session would.

Typical usage example:

    rsateach demo --p 61 --q 53 --message 65
    OR
    python -m rsateach
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import logging
import pathlib
import sys
import typing

import rsateach
from rsateach import arith
from rsateach import keystore
from rsateach.rsa import KeyContext


def integer(text: str) -> int:
    """Integer argument type, accepting 0x/0o/0b prefixes."""
    return arith.parse_integer(text)


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Callable = str
    choices: list[str] | None = None
    default: typing.Any = None
    advanced: bool = False


help_dict: dict[str, HelpData] = {
    "subcommand":
        HelpData(
            description="The available subcommands in RSA Teach.",
            choices=["primes", "isprime", "mod", "keygen", "encrypt", "decrypt", "demo", "session"],
        ),
    "primes":
        HelpData("Table of small primes to pick p and q from."),
    "isprime":
        HelpData("Primality check by trial division."),
    "mod":
        HelpData("Modular arithmetic on a clock face."),
    "keygen":
        HelpData("Key generation walkthrough."),
    "encrypt":
        HelpData("Encryption walkthrough."),
    "decrypt":
        HelpData("Decryption walkthrough."),
    "demo":
        HelpData("Key generation, encryption and decryption in one go."),
    "session":
        HelpData("Interactive session keeping keys between operations."),
    "action":
        HelpData(
            description="What to do next in this session.",
            choices=["keygen", "encrypt", "decrypt", "history", "quit"],
        ),
    "history":
        HelpData("Show the operations of this session."),
    "quit":
        HelpData("End the session."),
    "limit":
        HelpData(
            description="Largest number to include in the prime table.",
            format=integer,
            default=100,
        ),
    "number":
        HelpData(
            description="The number to test for primality, or to reduce.",
            format=integer,
        ),
    "modulus":
        HelpData(
            description="Positions on the clock face, the modulus.",
            format=integer,
            default=12,
        ),
    "p":
        HelpData(
            description="First prime, p.",
            format=integer,
            default=11,
        ),
    "q":
        HelpData(
            description="Second prime, q. Must differ from p.",
            format=integer,
            default=13,
        ),
    "pub_exponent":
        HelpData(
            description="Exponent for the public key.",
            format=integer,
            advanced=True,
            default=rsateach.keygen.PUBLIC_EXPONENT,
        ),
    "key_file":
        HelpData(
            description="Location of the key file.",
            format=pathlib.Path,
        ),
    "message":
        HelpData(
            description="Plaintext message M, an integer below N.",
            format=integer,
            default=88,
        ),
    "ciphertext":
        HelpData(
            description="Ciphertext C, an integer.",
            format=integer,
        ),
    "detailed":
        HelpData(
            description="Whether to show every square-and-multiply round.",
            format=bool,
            advanced=True,
            default=False,
        ),
    "overwrite":
        HelpData(
            description="Overwrite specified destination files if they exist?",
            choices=["Y", "N"],
            default="N",
        )
}

needs = {
    "primes": ("limit",),
    "isprime": ("number",),
    "mod": ("number", "modulus"),
    "keygen": ("p", "q", "pub_exponent"),
    "encrypt": ("key_file", "message"),
    "decrypt": ("key_file", "ciphertext"),
    "demo": ("p", "q", "pub_exponent", "message"),
    "session": (),
}

primepair = argparse.ArgumentParser(add_help=False)
primepair.add_argument("--p", type=help_dict["p"].format, help=help_dict["p"].description)
primepair.add_argument("--q", type=help_dict["q"].format, help=help_dict["q"].description)
primepair.add_argument("--pub-exponent",
                       type=help_dict["pub_exponent"].format,
                       help=help_dict["pub_exponent"].description)
keyfile = argparse.ArgumentParser(add_help=False)
keyfile.add_argument("--key-file", "-k", type=help_dict["key_file"].format, help=help_dict["key_file"].description)
details = argparse.ArgumentParser(add_help=False)
details.add_argument("--detailed", "-d", action="store_true", help=help_dict["detailed"].description)
corep = argparse.ArgumentParser(prog="rsateach")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {rsateach.__version__}")
corep.add_argument("--non-interactive", "-n", action="store_true", help="Enable non-interactive mode")
corep.add_argument("--advanced", "-a", action="store_true", help="Enable advanced mode, for interactive mode")
corep.add_argument("--verbose", "-V", action="store_true", help="Enable debug logging")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands")

table = commands.add_parser("primes", help=help_dict["primes"].description)
table.add_argument("--limit", type=help_dict["limit"].format, help=help_dict["limit"].description)
isprime = commands.add_parser("isprime", help=help_dict["isprime"].description)
isprime.add_argument("--number", type=help_dict["number"].format, help=help_dict["number"].description)
clock = commands.add_parser("mod", help=help_dict["mod"].description)
clock.add_argument("--number", type=help_dict["number"].format, help=help_dict["number"].description)
clock.add_argument("--modulus", type=help_dict["modulus"].format, help=help_dict["modulus"].description)

keygen = commands.add_parser("keygen", parents=[primepair], help=help_dict["keygen"].description)
keygen.add_argument("--key-file", "-k", type=help_dict["key_file"].format, help="Optionally save the keys here.")
keygen.add_argument("--overwrite", "-o", action="store_const", const="Y", help=help_dict["overwrite"].description)

encrypt = commands.add_parser("encrypt", parents=[keyfile, details], help=help_dict["encrypt"].description)
encrypt.add_argument("--message", "-m", type=help_dict["message"].format, help=help_dict["message"].description)
decrypt = commands.add_parser("decrypt", parents=[keyfile, details], help=help_dict["decrypt"].description)
decrypt.add_argument("--ciphertext",
                     "-c",
                     type=help_dict["ciphertext"].format,
                     help=help_dict["ciphertext"].description)

demo = commands.add_parser("demo", parents=[primepair, details], help=help_dict["demo"].description)
demo.add_argument("--message", "-m", type=help_dict["message"].format, help=help_dict["message"].description)
session = commands.add_parser("session", parents=[details], help=help_dict["session"].description)


def checkmodes(arg: str, mode: tuple[bool, bool]):
    helper_data = help_dict[arg]
    if (mode[0] or (helper_data.advanced and not mode[1])) and helper_data.default is not None:
        return helper_data.default
    if mode[0]:
        raise IOError(f"Argument {arg} is missing and non-interactive mode is active.")
    return helper_data


def choice_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    choices = helper_data.choices
    vald = set(choices)
    for choice in choices:
        defstring = " (Default)" if choice == helper_data.default else ""
        if help_dict.get(choice, None):
            prntr(f"{choice} - {help_dict[choice].description}" + defstring)
        else:
            prntr(f"{choice}" + defstring)
    if helper_data.default is not None:
        prntr("To accept default just click enter. Otherwise specify value.")
    while True:
        ch = input(f"{arg}: ")
        if ch in vald:
            return ch
        if not ch and helper_data.default is not None:
            return helper_data.default
        prntr("Please select an option from the list.")


def input_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    if helper_data.default is not None:
        prntr(f"Default value: {helper_data.default}")
        prntr("To accept default just click enter. Otherwise specify value.")
    cls = helper_data.format
    while True:
        ch = input(f"{arg}: ")
        if not ch and helper_data.default is not None:
            return helper_data.default
        if ch == "":
            prntr("Please provide a value.")
            continue
        try:
            return cls(ch)
        except ValueError:
            prntr(f"We could not convert your value to {cls.__name__}.")


def show_steps(title: str, steps: typing.Iterable[str]) -> None:
    print(f"\n{title}")
    for step in steps:
        print(step)


def run_session(ctx: KeyContext, mode: tuple[bool, bool], detailed: bool = False) -> None:
    """Loops over session actions until the user quits, reporting errors without leaving the session."""
    while True:
        action = choice_handler("action", mode)
        try:
            match action:
                case "keygen":
                    p, q = input_handler("p", mode), input_handler("q", mode)
                    res = ctx.generate(p, q, input_handler("pub_exponent", mode))
                    show_steps("Key generation:", res.steps)
                case "encrypt":
                    res = ctx.encrypt(input_handler("message", mode), detailed)
                    show_steps("Encryption:", res.steps)
                case "decrypt":
                    res = ctx.decrypt(input_handler("ciphertext", mode), detailed)
                    show_steps("Decryption:", res.steps)
                case "history":
                    show_history(ctx)
                case "quit":
                    return
        except rsateach.RSATeachError as exc:
            print(f"{exc.kind}: {exc.message}")
        print(f"\nKey state: {ctx.state.value}\n")


def show_history(ctx: KeyContext) -> None:
    entries = ctx.history.entries()
    if not entries:
        print("No operations performed in this session yet.")
        return
    print("Past operations (this session):")
    for entry in entries:
        print(f"[{entry.timestamp:%Y-%m-%d %H:%M:%S}] {entry.operation}: {entry.summary}")


def execute(args: argparse.Namespace, pstatus: tuple[bool, bool], pspr: typing.Callable) -> None:
    """Runs the fully specified subcommand."""
    match args.subcommand:
        case "primes":
            found = arith.primes_up_to(args.limit)
            pspr(f"Primes up to {args.limit}:")
            print(" ".join(str(p) for p in found))
        case "isprime":
            verdict = "is prime" if arith.is_prime(args.number) else "is not prime"
            print(f"{args.number} {verdict}")
        case "mod":
            steps: list[str] = []
            arith.residue(args.number, args.modulus, steps)
            show_steps("Modular arithmetic:", steps)
        case "keygen":
            ctx = KeyContext()
            res = ctx.generate(args.p, args.q, args.pub_exponent)
            show_steps("Key generation:", res.steps)
            if args.key_file is not None:
                if args.key_file.exists():
                    rs = getattr(args, "overwrite", None)
                    if rs is None:
                        rs = choice_handler("overwrite", pstatus, pspr)
                    if rs == "N":
                        print("Destination key file already exists!")
                        return
                keystore.export_keys(res.value, args.key_file)
                pspr(f"\nKeys saved to {args.key_file}")
        case "encrypt":
            ctx = KeyContext()
            ctx.load(keystore.import_keys(args.key_file))
            res = ctx.encrypt(args.message, args.detailed)
            show_steps("Encryption:", res.steps)
        case "decrypt":
            ctx = KeyContext()
            ctx.load(keystore.import_keys(args.key_file))
            res = ctx.decrypt(args.ciphertext, args.detailed)
            show_steps("Decryption:", res.steps)
        case "demo":
            ctx = KeyContext()
            show_steps("Key generation:", ctx.generate(args.p, args.q, args.pub_exponent).steps)
            enc = ctx.encrypt(args.message, args.detailed)
            show_steps("Encryption:", enc.steps)
            show_steps("Decryption:", ctx.decrypt(enc.value, args.detailed).steps)
            print()
            show_history(ctx)
        case "session":
            if pstatus[0]:
                raise IOError("The session subcommand needs interactive mode.")
            run_session(KeyContext(), pstatus, args.detailed)


def main(argv: list[str] | None = None) -> None:
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface)"""
    args = corep.parse_args(argv)
    pstatus = (args.non_interactive, args.advanced)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
        logging.getLogger("rsateach").setLevel(logging.DEBUG)

    def pspr(text: str):
        """Print only if not in non-interactive mode."""
        if not pstatus[0]:
            print(text)

    pspr("Welcome to RSA Teach!\n")
    if not args.subcommand:
        args.subcommand = choice_handler("subcommand", pstatus)
    for reqs in needs[args.subcommand]:
        if getattr(args, reqs, None) is None:
            if help_dict[reqs].choices is not None:
                res = choice_handler(reqs, pstatus)
            else:
                res = input_handler(reqs, pstatus)
            setattr(args, reqs, res)
        else:
            pspr(f"{reqs}: {getattr(args, reqs)}")
    pspr("\nInput Complete! Executing...")
    try:
        execute(args, pstatus, pspr)
    except rsateach.RSATeachError as exc:
        print(f"{exc.kind}: {exc.message}")
        sys.exit(1)
    pspr("\nThank you for using RSA Teach!")
    pspr("Goodbye!")


if __name__ == "__main__":
    main()
