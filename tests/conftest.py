import os
import sys
from glob import glob
from typing import List

import pytest

from tests.test_util import ROOT, open_file

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))


@pytest.fixture(scope="session")
def hello_program() -> str:
    return open_file("data/valid/hello.pineapple")


@pytest.fixture(scope="session")
def multiple_program() -> str:
    return open_file("data/valid/multiple.pineapple")


def data_files(pattern: str) -> List[str]:
    return sorted(
        os.path.relpath(file, ROOT)
        for file in glob(os.path.join(ROOT, "data", pattern), recursive=True)
    )


def valid_files() -> List[str]:
    return data_files("valid/*.pineapple")


def lexer_error_files() -> List[str]:
    return data_files("custom/lexerError/*.pineapple")


def parser_error_files() -> List[str]:
    return data_files("custom/parserError/*.pineapple")


@pytest.fixture(scope="session", params=valid_files())
def valid_file(request) -> str:
    return request.param


@pytest.fixture(scope="session", params=lexer_error_files())
def lexer_error(request) -> str:
    return request.param


@pytest.fixture(scope="session", params=parser_error_files())
def parser_error(request) -> str:
    return request.param
