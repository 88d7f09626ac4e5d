"""Work detail bundling - work document, author names, subjects."""

from loguru import logger
from pydantic import ValidationError

from openlibrary_client import CatalogClient, safe_request
from openlibrary_client.catalog import WorkDetailSchema
from settings import SUBJECTS_LIMIT, UNKNOWN_AUTHOR


async def build_detail_bundle(client: CatalogClient, work_key: str) -> dict:
    """Fetch a work and resolve its authors into one cacheable document.

    A failed author lookup yields ``UNKNOWN_AUTHOR`` instead of failing the
    whole work; a failed work fetch propagates.
    """
    work = await client.get_work_detail(work_key)

    try:
        schema = WorkDetailSchema.model_validate(work)
        author_keys, subjects = schema.author_keys, schema.subjects
    except ValidationError as e:
        logger.debug("Loose work document {}: {}", work_key, e)
        author_keys, subjects = _loose_author_keys(work), _loose_subjects(work)

    author_names = []
    for key in author_keys:
        author_names.append(await safe_request(client.get_author_name(key), UNKNOWN_AUTHOR))

    return {
        "work": work,
        "authorNames": author_names,
        "subjects": subjects[:SUBJECTS_LIMIT],
    }


def _loose_author_keys(work) -> list[str]:
    authors = work.get("authors") if isinstance(work, dict) else None
    keys = []
    for entry in authors if isinstance(authors, list) else []:
        if not isinstance(entry, dict):
            continue
        author = entry.get("author")
        key = author.get("key") if isinstance(author, dict) else entry.get("key")
        if isinstance(key, str) and key:
            keys.append(key)
    return keys


def _loose_subjects(work) -> list[str]:
    subjects = work.get("subjects") if isinstance(work, dict) else None
    if not isinstance(subjects, list):
        return []
    return [s for s in subjects if isinstance(s, str)]
