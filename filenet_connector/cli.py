#!/usr/bin/env python3
"""
Command line interface for the FileNet connector.

Diagnostic commands run single document operations against the ECM
configured through the FILENET_* environment variables, and ``worker``
starts the Temporal worker. The caller identity is passed with ``--uid``
and ends up in the same workflow-variables headers the engine would send.
"""

import asyncio
import json
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional, Tuple

import click
from pydantic import ValidationError

from filenet_connector.config import FileNetSettings
from filenet_connector.domain import (
    Attribute,
    DocumentData,
    DocumentIdentity,
    NewDocument,
)
from filenet_connector.repositories.document import DocumentOperations
from filenet_connector.repositories.ecm.client import HttpEcmClient
from filenet_connector.repositories.ecm.document import (
    FileNetDocumentOperations,
)
from filenet_connector.validation import ensure_document_operations

logger = logging.getLogger(__name__)


@asynccontextmanager
async def open_document_operations(
    settings: FileNetSettings,
) -> AsyncIterator[DocumentOperations]:
    """Document operations whose HTTP client is closed on exit."""
    async with HttpEcmClient(settings) as client:
        yield ensure_document_operations(
            FileNetDocumentOperations(client, settings)
        )


def workflow_variables_for(uid: Optional[str]) -> Optional[str]:
    """Serialize workflow variables carrying ``uid`` as the caller."""
    if uid is None:
        return None
    return json.dumps({"headers": {"uid": uid}})


def parse_attributes(values: Tuple[str, ...]) -> list[Attribute]:
    attributes = []
    for value in values:
        name, separator, attribute_value = value.partition("=")
        if not separator or not name:
            raise click.BadParameter(
                f"expected NAME=VALUE, got {value!r}", param_hint="--attribute"
            )
        attributes.append(Attribute(name=name, value=attribute_value))
    return attributes


def _identity(
    settings: FileNetSettings, document_id: str, version: Optional[str]
) -> DocumentIdentity:
    return DocumentIdentity(
        namespace=settings.namespace, external_id=document_id, version=version
    )


def _echo_identity(identity: Optional[DocumentIdentity]) -> None:
    if identity is None:
        raise click.ClickException("The ECM returned no document")
    click.echo(identity.model_dump_json(indent=2))


@click.group()
@click.option("--namespace", help="Overrides FILENET_NAMESPACE.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, namespace: Optional[str], verbose: bool) -> None:
    """FileNet ECM connector."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    ctx.obj = {"namespace": namespace}


def _settings(ctx: click.Context) -> FileNetSettings:
    try:
        return FileNetSettings.from_env(namespace=ctx.obj["namespace"])
    except ValidationError as e:
        raise click.ClickException(f"Invalid configuration: {e}") from e


uid_option = click.option("--uid", help="Caller identity (header 'uid').")
version_option = click.option("--version", "version", help="Revision.")


@main.command()
@click.argument(
    "path", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option("--mime-type", help="MIME type of the document.")
@click.option(
    "--attribute", "attributes", multiple=True, help="NAME=VALUE metadata."
)
@uid_option
@click.pass_context
def create(
    ctx: click.Context,
    path: Path,
    mime_type: Optional[str],
    attributes: Tuple[str, ...],
    uid: Optional[str],
) -> None:
    """Store the file at PATH as a new document."""
    settings = _settings(ctx)
    document = NewDocument(
        filename=path.name,
        mime_type=mime_type,
        content=path.read_bytes(),
        metadata=parse_attributes(attributes),
    )

    async def _run() -> Optional[DocumentIdentity]:
        async with open_document_operations(settings) as operations:
            return await operations.create(
                document, workflow_variables_for(uid)
            )

    _echo_identity(asyncio.run(_run()))


@main.command()
@click.argument("document_id")
@version_option
@uid_option
@click.pass_context
def info(
    ctx: click.Context,
    document_id: str,
    version: Optional[str],
    uid: Optional[str],
) -> None:
    """Show the metadata of DOCUMENT_ID."""
    settings = _settings(ctx)

    async def _run() -> Optional[DocumentIdentity]:
        async with open_document_operations(settings) as operations:
            return await operations.get_info(
                _identity(settings, document_id, version),
                workflow_variables_for(uid),
            )

    _echo_identity(asyncio.run(_run()))


@main.command()
@click.argument("document_id")
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="File to write the content to.",
)
@version_option
@uid_option
@click.pass_context
def content(
    ctx: click.Context,
    document_id: str,
    output: Path,
    version: Optional[str],
    uid: Optional[str],
) -> None:
    """Download the content of DOCUMENT_ID."""
    settings = _settings(ctx)

    async def _run() -> Optional[DocumentData]:
        async with open_document_operations(settings) as operations:
            return await operations.get_content(
                _identity(settings, document_id, version),
                workflow_variables_for(uid),
            )

    data = asyncio.run(_run())
    if data is None or data.content is None:
        raise click.ClickException("The ECM returned no content")
    output.write_bytes(data.content)
    click.echo(f"Wrote {len(data.content)} bytes to {output}")


@main.command()
@click.argument("document_id")
@uid_option
@click.pass_context
def delete(ctx: click.Context, document_id: str, uid: Optional[str]) -> None:
    """Delete DOCUMENT_ID."""
    settings = _settings(ctx)

    async def _run() -> Optional[DocumentIdentity]:
        async with open_document_operations(settings) as operations:
            return await operations.delete(
                _identity(settings, document_id, None),
                workflow_variables_for(uid),
            )

    _echo_identity(asyncio.run(_run()))


@main.command()
@click.pass_context
def worker(ctx: click.Context) -> None:
    """Run the Temporal worker hosting the document activities."""
    from filenet_connector.worker import run_worker

    asyncio.run(run_worker(_settings(ctx)))


if __name__ == "__main__":
    main()
