import sys
from textwrap import dedent, fill

import click
from twisted.python import log

from .. import __version__
from ..converter import PGPWordListConverter
from ..errors import (InvalidHexValueError, InvalidPGPWordError,
                      MissingTableEntryError)
from ..util import bytes_to_hexstr


class Config(object):
    """
    Union of config options that we pass down to (sub) commands.
    """

    def __init__(self):
        self.converter = PGPWordListConverter()
        # overwritten from the top-level options
        self.separator = " "
        self.lower = False
        self.verbose = False


ALIASES = {
    "enc": "encode",
    "dec": "decode",
    "words": "encode",
    "hex": "decode",
}


def _check_separator(ctx, param, value):
    if not value:
        raise click.BadParameter("must not be empty")
    return value


class AliasedGroup(click.Group):
    def get_command(self, ctx, cmd_name):
        cmd_name = ALIASES.get(cmd_name, cmd_name)
        return click.Group.get_command(self, ctx, cmd_name)


# top-level command ("pgpwords ...")
@click.group(cls=AliasedGroup)
@click.option(
    "--separator",
    default=" ",
    envvar="PGPWORDS_SEPARATOR",
    callback=_check_separator,
    metavar="SEP",
    help="string placed between words",
)
@click.option(
    "--lower",
    is_flag=True,
    default=False,
    help="print words in lower case",
)
@click.option(
    "--verbose",
    is_flag=True,
    default=False,
    help="(debug) log to stderr",
)
@click.version_option(
    message="pgpwords %(version)s",
    version=__version__,
)
@click.pass_context
def pgpwords(context, verbose, lower, separator):
    """
    Read out binary fingerprints as PGP words, and back.

    Each byte becomes one word. Bytes at even positions use the "even"
    list and bytes at odd positions the "odd" list, so a dropped or
    swapped word is noticed when the words are read back.
    """
    context.obj = cfg = Config()
    cfg.separator = separator
    cfg.lower = lower
    cfg.verbose = verbose
    if verbose:
        log.startLogging(sys.stderr)


def _dispatch_command(command):
    """
    Internal helper. This calls the given command (a no-argument
    callable) and interprets any errors for the user.
    """
    log.msg("pgpwords command dispatch")
    try:
        command()
    except (InvalidHexValueError, InvalidPGPWordError,
            MissingTableEntryError) as e:
        msg = fill("ERROR: " + dedent(e.__doc__))
        click.echo(msg, err=True)
        click.echo("", err=True)
        click.echo(str(e), err=True)
        raise SystemExit(1)


def _format_words(cfg, words):
    if cfg.lower:
        words = [w.lower() for w in words]
    return cfg.separator.join(words)


def _split_words(cfg, args):
    words = []
    for arg in args:
        if cfg.separator.strip():
            arg = arg.replace(cfg.separator, " ")
        words.extend(arg.split())
    return words


@pgpwords.command()
@click.pass_context
def help(context, **kwargs):
    click.echo(context.find_root().get_help())


# pgpwords encode (or "pgpwords enc")
@pgpwords.command()
@click.argument("fingerprint", nargs=-1, required=True)
@click.pass_obj
def encode(cfg, fingerprint):
    """Turn a hex fingerprint into PGP words"""
    def _encode():
        words = cfg.converter.hex_to_words(" ".join(fingerprint))
        click.echo(_format_words(cfg, words))
    _dispatch_command(_encode)


# pgpwords decode (or "pgpwords dec")
@pgpwords.command()
@click.option(
    "--check-order/--no-check-order",
    default=True,
    help="require words to alternate between the even and odd lists",
)
@click.argument("words", nargs=-1, required=True)
@click.pass_obj
def decode(cfg, check_order, words):
    """Turn PGP words back into a hex fingerprint"""
    def _decode():
        data = cfg.converter.words_to_bytes(_split_words(cfg, words),
                                            check_parity=check_order)
        click.echo(bytes_to_hexstr(data).upper())
    _dispatch_command(_decode)


@pgpwords.command()
@click.argument("token")
@click.pass_obj
def lookup(cfg, token):
    """
    Show both words for a hex byte, or the hex value of a word
    """
    def _lookup():
        if len(token.strip()) <= 2:
            even = cfg.converter.even_word_for_hex(token)
            odd = cfg.converter.odd_word_for_hex(token)
            click.echo(_format_words(cfg, [even, odd]))
        else:
            click.echo(cfg.converter.hex_for_word(token.strip()))
    _dispatch_command(_lookup)


@pgpwords.command()
@click.option(
    "-n",
    "--num-words",
    default=2,
    metavar="NUMWORDS",
    help="length of the phrase being completed",
)
@click.argument("prefix", default="")
@click.pass_obj
def complete(cfg, num_words, prefix):
    """List the ways PREFIX could continue"""
    wordlist = cfg.converter.wordlist
    for completion in sorted(wordlist.get_completions(
            prefix, num_words, separator=cfg.separator)):
        click.echo(completion)
