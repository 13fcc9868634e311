from __future__ import annotations

"""
A minimal pygls-based Language Server for Clove.

Features:
- Text synchronization and document store
- Diagnostics: reader errors (unterminated forms, stray tokens, bad literals)

Note: We avoid evaluating the buffer; documents are only read.
"""

import logging
from typing import Dict

from pygls.server import LanguageServer
from lsprotocol.types import (
    DidOpenTextDocumentParams,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    TextDocumentSyncKind,
)

from clove_lsp.diagnostics import collect_diagnostics

logger = logging.getLogger(__name__)


class CloveLanguageServer(LanguageServer):
    CMD_NAME = "clove-ls"
    VERSION = "0.1.0"

    def __init__(self):
        super().__init__(
            self.CMD_NAME,
            self.VERSION,
            text_document_sync_kind=TextDocumentSyncKind.Full,
        )
        self.documents: Dict[str, str] = {}


ls = CloveLanguageServer()


@ls.feature("textDocument/didOpen")
def did_open(params: DidOpenTextDocumentParams):
    uri = params.text_document.uri
    ls.documents[uri] = params.text_document.text or ""
    _publish_diagnostics(uri)


@ls.feature("textDocument/didChange")
def did_change(params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    if params.content_changes:
        ls.documents[uri] = params.content_changes[-1].text
    _publish_diagnostics(uri)


@ls.feature("textDocument/didClose")
def did_close(params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    ls.documents.pop(uri, None)
    ls.publish_diagnostics(uri, [])


def _publish_diagnostics(uri: str):
    diags = collect_diagnostics(ls.documents.get(uri, ""))
    logger.debug("%s: %d diagnostics", uri, len(diags))
    ls.publish_diagnostics(uri, diags)


def main():
    # Run the language server over stdio
    ls.start_io()


if __name__ == "__main__":
    main()
