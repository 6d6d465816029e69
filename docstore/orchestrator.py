import os
import json
import logging
from typing import Optional
from tqdm import tqdm

from docstore.loader import load
from docstore.relations import RelationIndex

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def export_store(content_dir: str, output_path: str, separator: Optional[str] = None) -> str:
    """
    Load a content directory and write a JSON summary of its documents.

    Args:
        content_dir: Path to the directory of text documents
        output_path: Path to save the output JSON file
        separator: Literal separator token, or "auto" to discover it

    Returns:
        Path to the generated output file
    """
    logger.info(f"Starting export of content directory: {content_dir}")

    store = load(content_dir, separator=separator)
    relations = RelationIndex.build(store)

    documents = []
    for doc_id in tqdm(store, desc="Exporting documents"):
        document = store.get(doc_id)
        entry = document.to_dict()
        entry["related_ids"] = sorted(relations.related_ids(doc_id))
        entry["orphan_segment_count"] = len(relations.orphan_segments(doc_id))
        documents.append(entry)

    result_dict = {
        "content_dir": os.path.abspath(content_dir),
        "separator": store.separator,
        "total_documents": len(store),
        "total_related_links": len(relations.edges()),
        "documents": documents,
    }

    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(result_dict, f, indent=2, ensure_ascii=False)

    logger.info(f"Export complete. Wrote {len(documents)} documents.")
    logger.info(f"Output saved to {output_path}")

    return output_path
