"""Pytest configuration and fixtures."""

import pytest

from doc_breadcrumbs.core import CommentRecord, Language
from doc_breadcrumbs.extraction import BreadcrumbExtractor
from doc_breadcrumbs.parsers import get_provider_registry


@pytest.fixture
def extract():
    """Parse source text and return its comment records."""

    def _extract(source_code: str, language: Language = Language.TYPESCRIPT) -> list[CommentRecord]:
        tree = get_provider_registry().get_provider(language).parse(source_code)
        return BreadcrumbExtractor().extract(tree)

    return _extract


@pytest.fixture
def sample_typescript_code() -> str:
    """Sample TypeScript code with doc comments at every nesting level."""
    return '''import { BaseService, Repository } from './base'

/**
 * Service managing users.
 */
export class UserService extends BaseService {
  /** Cache of users */
  private cache = new Map<string, User>()

  /**
   * Creates the service.
   */
  constructor(
    /** Display name */
    public name: string,
    /** Repository */
    private readonly repo: Repository,
  ) {
    super()
  }

  /** Updates a user */
  update(/** The new value */ value: User): void {
    this.cache.set(value.id, value)
  }

  /** Current size */
  get size(): number {
    return this.cache.size
  }
}

/** A user record */
export interface User {
  /** Identifier */
  id: string
  /** Optional nickname */
  nickname?: string
}

/** Status values */
export enum Status {
  /** Active account */
  Active,
  /** Suspended account */
  Suspended = 'suspended',
}

/** Shape of settings */
type Settings = {
  /** Port to bind */
  port: number
}

// Not a doc comment
/* Not one either */
/** Default options */
export const defaults = {
  /** Retry count */
  retries: 3,
}
'''


@pytest.fixture
def sample_typescript_breadcrumbs() -> list[tuple[str, ...]]:
    """Expected breadcrumbs for ``sample_typescript_code``, in source order."""
    return [
        ("UserService",),
        ("UserService", "cache"),
        ("UserService", "Constructor"),
        ("UserService", "Constructor", "name"),
        ("UserService", "Constructor", "repo"),
        ("UserService", "update"),
        ("UserService", "update", "value"),
        ("UserService", "size"),
        ("User",),
        ("User", "id"),
        ("User", "nickname"),
        ("Status",),
        ("Status", "Active"),
        ("Status", "Suspended"),
        ("Settings",),
        ("Settings", "port"),
        ("defaults",),
        ("defaults", "retries"),
    ]


@pytest.fixture
def sample_javascript_code() -> str:
    """Sample JavaScript code for testing providers."""
    return '''import { fetchData } from './api';

/** Loads and caches data. */
class DataManager {
  /** Number of loads */
  count = 0;

  /** Build a manager */
  constructor(/** Endpoint config */ config) {
    this.config = config;
  }

  /** Load everything */
  async loadData(/** Page size */ limit = 10) {
    this.count += 1;
    return fetchData(this.config.endpoint, limit);
  }
}

/** Formats a result */
const formatResult = (/** The result */ result) => {
  return JSON.stringify(result, null, 2);
};

export { DataManager, formatResult };
'''
