"""FastAPI application serving docshelf content as JSON."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from docshelf.config import AppConfig
from docshelf.index.navigation import build_navigation
from docshelf.index.pager import neighbors
from docshelf.index.paths import SitemapEntry, all_slugs, sitemap_entries
from docshelf.index.resolver import resolve
from docshelf.index.search import Searcher, SearchResult
from docshelf.index.store import ContentCache
from docshelf.models import Document
from docshelf.utils.text import rewrite_internal_links

LOGGER = logging.getLogger(__name__)

app = FastAPI(title="docshelf", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

_cache: Optional[ContentCache] = None


class PageLink(BaseModel):
    slug: str
    title: str


class DocumentResponse(BaseModel):
    slug: str
    title: str
    description: str
    metadata: Dict[str, Any]
    body: str
    previous: Optional[PageLink] = None
    next: Optional[PageLink] = None


class PagerResponse(BaseModel):
    previous: Optional[PageLink] = None
    next: Optional[PageLink] = None


def configure(config: AppConfig) -> ContentCache:
    """Point the application at a content root, discarding any cached index."""
    global _cache
    _cache = ContentCache(config.resolve_content_root(Path.cwd()), config=config)
    return _cache


def _get_cache() -> ContentCache:
    if _cache is None:
        return configure(AppConfig())
    return _cache


def _get_config() -> AppConfig:
    return _get_cache().config


@app.on_event("startup")
async def startup_event() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")


def _document_response(document: Document, rewrite_links: bool) -> DocumentResponse:
    config = _get_config()
    index = _get_cache().get_or_load()
    links = neighbors(build_navigation(index, config=config), document.slug).to_dict()
    body = document.body
    if rewrite_links:
        body = rewrite_internal_links(body, prefix=config.docs_prefix)
    return DocumentResponse(
        slug=document.slug,
        title=document.title,
        description=document.description,
        metadata=dict(document.metadata),
        body=body,
        previous=links["previous"],
        next=links["next"],
    )


@app.get("/api/docs")
@app.get("/api/docs/{slug:path}")
async def get_document(slug: str = "", rewrite_links: bool = False) -> DocumentResponse:
    segments = [part for part in slug.split("/") if part]
    document = resolve(_get_cache().get_or_load(), segments, config=_get_config())
    if not isinstance(document, Document):
        raise HTTPException(status_code=404, detail=f"Document not found: /{slug}")
    return _document_response(document, rewrite_links)


@app.get("/api/navigation")
async def get_navigation() -> Dict[str, Any]:
    tree = build_navigation(_get_cache().get_or_load(), config=_get_config())
    return tree.to_dict()


@app.get("/api/paths")
async def list_paths() -> Dict[str, List[List[str]]]:
    return {"paths": all_slugs(_get_cache().get_or_load())}


@app.get("/api/pager")
async def get_pager(slug: str = "") -> PagerResponse:
    tree = build_navigation(_get_cache().get_or_load(), config=_get_config())
    links = neighbors(tree, slug.strip("/"))
    return PagerResponse(**links.to_dict())


@app.get("/api/search")
async def search_documents(
    q: str = Query("", description="Query text"), top_k: int = 10
) -> Dict[str, List[SearchResult]]:
    query = q.strip()
    if not query:
        raise HTTPException(status_code=400, detail="Empty query")
    top_k = max(1, min(top_k, 50))
    return {"results": Searcher(_get_cache().get_or_load()).search(query, top_k=top_k)}


@app.get("/sitemap.json")
async def get_sitemap() -> Dict[str, List[SitemapEntry]]:
    config = _get_config()
    entries = sitemap_entries(
        _get_cache().get_or_load(), config.base_url, docs_prefix=config.docs_prefix
    )
    return {"entries": entries}


@app.post("/api/rebuild")
async def rebuild_index() -> Dict[str, Any]:
    try:
        index = _get_cache().rebuild()
    except Exception as exc:  # pragma: no cover - defensive
        LOGGER.exception("Rebuild failed: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return {"status": "ok", "documents": len(index)}
