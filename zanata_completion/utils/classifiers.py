"""Classify options by the kind of value they expect"""
from typing import Iterable, Iterator

from ..core.config import DIR_TOKEN, FILE_TOKEN, URL_TOKEN
from ..core.options import OptionDescriptor


def find_by_metavar(options: Iterable[OptionDescriptor],
                    token: str) -> Iterator[OptionDescriptor]:
    """
    Lazily select options whose metavar contains token, ignoring case

    This is a heuristic: a metavar such as "filedir" matches both "file" and
    "dir", and the option is then completed under both categories.

    Examples:
        >>> opts = [OptionDescriptor("--src-dir", "DIR"), OptionDescriptor("-q")]
        >>> list(find_by_metavar(opts, "dir"))
        [OptionDescriptor(name='--src-dir', metavar='DIR')]
    """
    return (option for option in options
            if option.metavar and token in option.metavar.lower())


class Classification:
    """File, directory and URL views over a set of options"""

    def __init__(self, options: Iterable[OptionDescriptor]):
        self.options = tuple(options)

    @property
    def file_options(self) -> Iterator[OptionDescriptor]:
        return find_by_metavar(self.options, FILE_TOKEN)

    @property
    def dir_options(self) -> Iterator[OptionDescriptor]:
        return find_by_metavar(self.options, DIR_TOKEN)

    @property
    def url_options(self) -> Iterator[OptionDescriptor]:
        return find_by_metavar(self.options, URL_TOKEN)
