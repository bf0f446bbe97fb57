"""Document, search and script endpoints (no namespace)."""

_DOCS = 'https://www.elastic.co/guide/en/elasticsearch/reference/current'

_SOURCE_FILTERING = {
    '_source': 'list',
    '_source_excludes': 'list',
    '_source_includes': 'list',
}

_QUERY_STRING = {
    'analyze_wildcard': 'boolean',
    'analyzer': 'string',
    'default_operator': 'enum',
    'df': 'string',
    'lenient': 'boolean',
    'q': 'string',
}

_INDEX_SELECTION = {
    'allow_no_indices': 'boolean',
    'expand_wildcards': 'enum',
    'ignore_unavailable': 'boolean',
}

_GET_PARAMS = {
    'preference': 'string',
    'realtime': 'boolean',
    'refresh': 'boolean',
    'routing': 'string',
    **_SOURCE_FILTERING,
    'stored_fields': 'list',
    'version': 'number',
    'version_type': 'enum',
}

_WRITE_PARAMS = {
    'refresh': 'enum',
    'routing': 'string',
    'timeout': 'time',
    'wait_for_active_shards': 'string',
}

_BY_QUERY_PARAMS = {
    **_INDEX_SELECTION,
    **_QUERY_STRING,
    'conflicts': 'enum',
    'from': 'number',
    'max_docs': 'number',
    'preference': 'string',
    'refresh': 'boolean',
    'request_cache': 'boolean',
    'requests_per_second': 'number',
    'routing': 'list',
    'scroll': 'time',
    'scroll_size': 'number',
    'search_timeout': 'time',
    'search_type': 'enum',
    'slices': 'number',
    'sort': 'list',
    **_SOURCE_FILTERING,
    'stats': 'list',
    'terminate_after': 'number',
    'timeout': 'time',
    'version': 'boolean',
    'wait_for_active_shards': 'string',
    'wait_for_completion': 'boolean',
}

ENDPOINTS = {
    'info': {
        'documentation': f'{_DOCS}/index.html',
        'url': {'paths': [{'path': '/', 'methods': ['GET']}]},
    },
    'ping': {
        'documentation': f'{_DOCS}/index.html',
        'url': {'paths': [{'path': '/', 'methods': ['HEAD']}]},
    },
    'search': {
        'documentation': f'{_DOCS}/search-search.html',
        'url': {
            'paths': [
                {'path': '/_search', 'methods': ['GET', 'POST']},
                {
                    'path': '/{index}/_search',
                    'methods': ['GET', 'POST'],
                    'parts': {'index': 'list'},
                },
                {
                    'path': '/{index}/{type}/_search',
                    'methods': ['GET', 'POST'],
                    'parts': {'index': 'list', 'type': 'list'},
                },
            ]
        },
        'params': {
            **_INDEX_SELECTION,
            **_QUERY_STRING,
            'allow_partial_search_results': 'boolean',
            'batched_reduce_size': 'number',
            'ccs_minimize_roundtrips': 'boolean',
            'docvalue_fields': 'list',
            'explain': 'boolean',
            'from': 'number',
            'ignore_throttled': 'boolean',
            'max_concurrent_shard_requests': 'number',
            'pre_filter_shard_size': 'number',
            'preference': 'string',
            'request_cache': 'boolean',
            'rest_total_hits_as_int': 'boolean',
            'routing': 'list',
            'scroll': 'time',
            'search_type': 'enum',
            'seq_no_primary_term': 'boolean',
            'size': 'number',
            'sort': 'list',
            **_SOURCE_FILTERING,
            'stats': 'list',
            'stored_fields': 'list',
            'suggest_field': 'string',
            'suggest_mode': 'enum',
            'suggest_size': 'number',
            'suggest_text': 'string',
            'terminate_after': 'number',
            'timeout': 'time',
            'track_scores': 'boolean',
            'track_total_hits': 'any',
            'typed_keys': 'boolean',
            'version': 'boolean',
        },
        'body': {'description': 'The search definition using the Query DSL'},
    },
    'count': {
        'documentation': f'{_DOCS}/search-count.html',
        'url': {
            'paths': [
                {'path': '/_count', 'methods': ['GET', 'POST']},
                {
                    'path': '/{index}/_count',
                    'methods': ['GET', 'POST'],
                    'parts': {'index': 'list'},
                },
                {
                    'path': '/{index}/{type}/_count',
                    'methods': ['GET', 'POST'],
                    'parts': {'index': 'list', 'type': 'list'},
                },
            ]
        },
        'params': {
            **_INDEX_SELECTION,
            **_QUERY_STRING,
            'ignore_throttled': 'boolean',
            'min_score': 'number',
            'preference': 'string',
            'routing': 'list',
            'terminate_after': 'number',
        },
        'body': {'description': 'A query to restrict the results'},
    },
    'get': {
        'documentation': f'{_DOCS}/docs-get.html',
        'url': {'paths': [{'path': '/{index}/_doc/{id}', 'methods': ['GET']}]},
        'params': _GET_PARAMS,
    },
    'exists': {
        'documentation': f'{_DOCS}/docs-get.html',
        'url': {'paths': [{'path': '/{index}/_doc/{id}', 'methods': ['HEAD']}]},
        'params': _GET_PARAMS,
    },
    'get_source': {
        'documentation': f'{_DOCS}/docs-get.html',
        'url': {'paths': [{'path': '/{index}/_source/{id}', 'methods': ['GET']}]},
        'params': _GET_PARAMS,
    },
    'index': {
        'documentation': f'{_DOCS}/docs-index_.html',
        'url': {
            'paths': [
                {'path': '/{index}/_doc/{id}', 'methods': ['PUT', 'POST']},
                {'path': '/{index}/_doc', 'methods': ['POST']},
            ]
        },
        'params': {
            **_WRITE_PARAMS,
            'if_primary_term': 'number',
            'if_seq_no': 'number',
            'op_type': 'enum',
            'pipeline': 'string',
            'version': 'number',
            'version_type': 'enum',
        },
        'body': {'description': 'The document', 'required': True},
    },
    'create': {
        'documentation': f'{_DOCS}/docs-index_.html',
        'url': {
            'paths': [{'path': '/{index}/_create/{id}', 'methods': ['PUT', 'POST']}]
        },
        'params': {
            **_WRITE_PARAMS,
            'pipeline': 'string',
            'version': 'number',
            'version_type': 'enum',
        },
        'body': {'description': 'The document', 'required': True},
    },
    'update': {
        'documentation': f'{_DOCS}/docs-update.html',
        'url': {'paths': [{'path': '/{index}/_update/{id}', 'methods': ['POST']}]},
        'params': {
            **_WRITE_PARAMS,
            **_SOURCE_FILTERING,
            'if_primary_term': 'number',
            'if_seq_no': 'number',
            'lang': 'string',
            'retry_on_conflict': 'number',
        },
        'body': {
            'description': 'The request definition requires either `script` or '
            'partial `doc`',
            'required': True,
        },
    },
    'delete': {
        'documentation': f'{_DOCS}/docs-delete.html',
        'url': {'paths': [{'path': '/{index}/_doc/{id}', 'methods': ['DELETE']}]},
        'params': {
            **_WRITE_PARAMS,
            'if_primary_term': 'number',
            'if_seq_no': 'number',
            'version': 'number',
            'version_type': 'enum',
        },
    },
    'bulk': {
        'documentation': f'{_DOCS}/docs-bulk.html',
        'url': {
            'paths': [
                {'path': '/_bulk', 'methods': ['POST', 'PUT']},
                {
                    'path': '/{index}/_bulk',
                    'methods': ['POST', 'PUT'],
                    'parts': {'index': 'string'},
                },
            ]
        },
        'params': {
            **_WRITE_PARAMS,
            **_SOURCE_FILTERING,
            'pipeline': 'string',
        },
        'body': {
            'description': 'The operation definition and data (action-data '
            'pairs), separated by newlines',
            'required': True,
            'serialize': 'bulk',
        },
    },
    'mget': {
        'documentation': f'{_DOCS}/docs-multi-get.html',
        'url': {
            'paths': [
                {'path': '/_mget', 'methods': ['GET', 'POST']},
                {
                    'path': '/{index}/_mget',
                    'methods': ['GET', 'POST'],
                    'parts': {'index': 'string'},
                },
            ]
        },
        'params': {
            key: value
            for key, value in _GET_PARAMS.items()
            if key not in ('version', 'version_type')
        },
        'body': {'description': 'Document identifiers', 'required': True},
    },
    'msearch': {
        'documentation': f'{_DOCS}/search-multi-search.html',
        'url': {
            'paths': [
                {'path': '/_msearch', 'methods': ['GET', 'POST']},
                {
                    'path': '/{index}/_msearch',
                    'methods': ['GET', 'POST'],
                    'parts': {'index': 'list'},
                },
            ]
        },
        'params': {
            'ccs_minimize_roundtrips': 'boolean',
            'max_concurrent_searches': 'number',
            'max_concurrent_shard_requests': 'number',
            'pre_filter_shard_size': 'number',
            'rest_total_hits_as_int': 'boolean',
            'search_type': 'enum',
            'typed_keys': 'boolean',
        },
        'body': {
            'description': 'The request definitions (metadata-search request '
            'definition pairs), separated by newlines',
            'required': True,
            'serialize': 'bulk',
        },
    },
    'scroll': {
        'documentation': f'{_DOCS}/search-request-body.html#request-body-search-scroll',
        'url': {
            'paths': [
                {'path': '/_search/scroll', 'methods': ['GET', 'POST']},
                {
                    'path': '/_search/scroll/{scroll_id}',
                    'methods': ['GET', 'POST'],
                    'parts': {'scroll_id': 'string'},
                },
            ]
        },
        'params': {
            'rest_total_hits_as_int': 'boolean',
            'scroll': 'time',
        },
        'body': {'description': 'The scroll ID if not passed by URL or query parameter.'},
    },
    'clear_scroll': {
        'documentation': f'{_DOCS}/search-request-body.html#_clear_scroll_api',
        'url': {
            'paths': [
                {'path': '/_search/scroll', 'methods': ['DELETE']},
                {
                    'path': '/_search/scroll/{scroll_id}',
                    'methods': ['DELETE'],
                    'parts': {'scroll_id': 'list'},
                },
            ]
        },
        'body': {'description': 'A comma-separated list of scroll IDs to clear'},
    },
    'delete_by_query': {
        'documentation': f'{_DOCS}/docs-delete-by-query.html',
        'url': {
            'paths': [
                {
                    'path': '/{index}/_delete_by_query',
                    'methods': ['POST'],
                    'parts': {'index': 'list'},
                }
            ]
        },
        'params': _BY_QUERY_PARAMS,
        'body': {'description': 'The search definition using the Query DSL', 'required': True},
    },
    'update_by_query': {
        'documentation': f'{_DOCS}/docs-update-by-query.html',
        'url': {
            'paths': [
                {
                    'path': '/{index}/_update_by_query',
                    'methods': ['POST'],
                    'parts': {'index': 'list'},
                }
            ]
        },
        'params': {
            **_BY_QUERY_PARAMS,
            'pipeline': 'string',
            'version_type': 'boolean',
        },
        'body': {'description': 'The search definition using the Query DSL'},
    },
    'reindex': {
        'documentation': f'{_DOCS}/docs-reindex.html',
        'url': {'paths': [{'path': '/_reindex', 'methods': ['POST']}]},
        'params': {
            'max_docs': 'number',
            'refresh': 'boolean',
            'requests_per_second': 'number',
            'scroll': 'time',
            'slices': 'number',
            'timeout': 'time',
            'wait_for_active_shards': 'string',
            'wait_for_completion': 'boolean',
        },
        'body': {
            'description': 'The search definition using the Query DSL and the '
            'prototype for the index request.',
            'required': True,
        },
    },
    'reindex_rethrottle': {
        'documentation': f'{_DOCS}/docs-reindex.html',
        'url': {
            'paths': [
                {
                    'path': '/_reindex/{task_id}/_rethrottle',
                    'methods': ['POST'],
                    'parts': {'task_id': 'string'},
                }
            ]
        },
        'params': {'requests_per_second': 'number'},
    },
    'explain': {
        'documentation': f'{_DOCS}/search-explain.html',
        'url': {
            'paths': [{'path': '/{index}/_explain/{id}', 'methods': ['GET', 'POST']}]
        },
        'params': {
            **_QUERY_STRING,
            'preference': 'string',
            'routing': 'string',
            **_SOURCE_FILTERING,
            'stored_fields': 'list',
        },
        'body': {'description': 'The query definition using the Query DSL'},
    },
    'field_caps': {
        'documentation': f'{_DOCS}/search-field-caps.html',
        'url': {
            'paths': [
                {'path': '/_field_caps', 'methods': ['GET', 'POST']},
                {
                    'path': '/{index}/_field_caps',
                    'methods': ['GET', 'POST'],
                    'parts': {'index': 'list'},
                },
            ]
        },
        'params': {
            **_INDEX_SELECTION,
            'fields': 'list',
            'include_unmapped': 'boolean',
        },
    },
    'get_script': {
        'documentation': f'{_DOCS}/modules-scripting.html',
        'url': {'paths': [{'path': '/_scripts/{id}', 'methods': ['GET']}]},
        'params': {'master_timeout': 'time'},
    },
    'put_script': {
        'documentation': f'{_DOCS}/modules-scripting.html',
        'url': {
            'paths': [
                {'path': '/_scripts/{id}', 'methods': ['PUT', 'POST']},
                {'path': '/_scripts/{id}/{context}', 'methods': ['PUT', 'POST']},
            ]
        },
        'params': {'master_timeout': 'time', 'timeout': 'time'},
        'body': {'description': 'The document', 'required': True},
    },
    'delete_script': {
        'documentation': f'{_DOCS}/modules-scripting.html',
        'url': {'paths': [{'path': '/_scripts/{id}', 'methods': ['DELETE']}]},
        'params': {'master_timeout': 'time', 'timeout': 'time'},
    },
}
