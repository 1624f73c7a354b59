"""
Seed the group vector index.

Embeds one text per FSC group ("Group 59: Electrical & Electronic Components.
Related: ...") and upserts it with {name, keywords} metadata. Run once after
creating the index (dimension must match FSC_EMBEDDING_DIMENSIONS, metric=cosine).

Usage:
    python -m fsc_classifier.index.seed_groups
    python -m fsc_classifier.index.seed_groups --dry-run
"""

from __future__ import annotations

import argparse
import asyncio
import logging

from fsc_classifier.ai.embeddings import OpenAIEmbedder
from fsc_classifier.config import Settings
from fsc_classifier.index.vector_index import IndexRecord, PineconeGroupIndex
from fsc_classifier.taxonomy.fsc import TaxonomyStore, build_group_text, load_taxonomy

logger = logging.getLogger(__name__)

EMBED_BATCH_SIZE = 25


async def build_group_records(
    taxonomy: TaxonomyStore,
    embedder: OpenAIEmbedder,
    batch_size: int = EMBED_BATCH_SIZE,
) -> list[IndexRecord]:
    groups = taxonomy.groups()
    records: list[IndexRecord] = []

    for start in range(0, len(groups), batch_size):
        batch = groups[start : start + batch_size]
        vectors = await embedder.embed_many([build_group_text(g) for g in batch])
        for group, vector in zip(batch, vectors):
            records.append(
                IndexRecord(
                    id=group.prefix,
                    values=vector,
                    metadata={"name": group.name, "keywords": list(group.keywords)},
                )
            )
        print(f"  Embedded {min(start + batch_size, len(groups))}/{len(groups)} groups")

    return records


def main() -> None:
    parser = argparse.ArgumentParser(description="Embed FSC groups and upsert them into the vector index.")
    parser.add_argument("--source", type=str, default=None, help="Taxonomy JSON/CSV (default: built-in)")
    parser.add_argument("--dry-run", action="store_true", help="Print group texts without embedding")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    settings = Settings()
    taxonomy = load_taxonomy(args.source or settings.keywords_path)

    if args.dry_run:
        for group in taxonomy.groups():
            print(build_group_text(group))
        return

    embedder = OpenAIEmbedder(settings)
    index = PineconeGroupIndex(settings)

    print(f"Embedding {len(taxonomy.groups())} groups with {settings.embedding_model}...")
    records = asyncio.run(build_group_records(taxonomy, embedder))

    count = index.upsert(records)
    print(f"Done. Upserted {count} group vectors into '{settings.pinecone_index}'")


if __name__ == "__main__":
    main()
