"""Index management endpoints."""

_DOCS = 'https://www.elastic.co/guide/en/elasticsearch/reference/current'

_INDEX_SELECTION = {
    'allow_no_indices': 'boolean',
    'expand_wildcards': 'enum',
    'ignore_unavailable': 'boolean',
}

_TIMEOUTS = {
    'master_timeout': 'time',
    'timeout': 'time',
}


def _paths(methods, *templates):
    return {'paths': [{'path': t, 'methods': list(methods)} for t in templates]}


ENDPOINTS = {
    'indices.analyze': {
        'documentation': f'{_DOCS}/indices-analyze.html',
        'url': _paths(('GET', 'POST'), '/_analyze', '/{index}/_analyze'),
        'body': {'description': 'Define analyzer/tokenizer parameters and the '
                 'text on which the analysis should be performed'},
    },
    'indices.clear_cache': {
        'documentation': f'{_DOCS}/indices-clearcache.html',
        'url': {
            'paths': [
                {'path': '/_cache/clear', 'methods': ['POST']},
                {
                    'path': '/{index}/_cache/clear',
                    'methods': ['POST'],
                    'parts': {'index': 'list'},
                },
            ]
        },
        'params': {
            **_INDEX_SELECTION,
            'fielddata': 'boolean',
            'fields': 'list',
            'query': 'boolean',
            'request': 'boolean',
        },
    },
    'indices.close': {
        'documentation': f'{_DOCS}/indices-open-close.html',
        'url': {
            'paths': [
                {'path': '/{index}/_close', 'methods': ['POST'], 'parts': {'index': 'list'}}
            ]
        },
        'params': {**_INDEX_SELECTION, **_TIMEOUTS, 'wait_for_active_shards': 'string'},
    },
    'indices.create': {
        'documentation': f'{_DOCS}/indices-create-index.html',
        'url': _paths(('PUT',), '/{index}'),
        'params': {
            **_TIMEOUTS,
            'include_type_name': 'boolean',
            'wait_for_active_shards': 'string',
        },
        'body': {'description': 'The configuration for the index (`settings` and '
                 '`mappings`)'},
    },
    'indices.delete': {
        'documentation': f'{_DOCS}/indices-delete-index.html',
        'url': {
            'paths': [{'path': '/{index}', 'methods': ['DELETE'], 'parts': {'index': 'list'}}]
        },
        'params': {**_INDEX_SELECTION, **_TIMEOUTS},
    },
    'indices.delete_alias': {
        'documentation': f'{_DOCS}/indices-aliases.html',
        'url': {
            'paths': [
                {
                    'path': '/{index}/_alias/{name}',
                    'methods': ['DELETE'],
                    'parts': {'index': 'list', 'name': 'list'},
                },
                {
                    'path': '/{index}/_aliases/{name}',
                    'methods': ['DELETE'],
                    'parts': {'index': 'list', 'name': 'list'},
                },
            ]
        },
        'params': _TIMEOUTS,
    },
    'indices.delete_template': {
        'documentation': f'{_DOCS}/indices-templates.html',
        'url': _paths(('DELETE',), '/_template/{name}'),
        'params': _TIMEOUTS,
    },
    'indices.exists': {
        'documentation': f'{_DOCS}/indices-exists.html',
        'url': {
            'paths': [{'path': '/{index}', 'methods': ['HEAD'], 'parts': {'index': 'list'}}]
        },
        'params': {
            **_INDEX_SELECTION,
            'flat_settings': 'boolean',
            'include_defaults': 'boolean',
            'local': 'boolean',
        },
    },
    'indices.exists_alias': {
        'documentation': f'{_DOCS}/indices-aliases.html',
        'url': {
            'paths': [
                {'path': '/_alias/{name}', 'methods': ['HEAD'], 'parts': {'name': 'list'}},
                {
                    'path': '/{index}/_alias/{name}',
                    'methods': ['HEAD'],
                    'parts': {'index': 'list', 'name': 'list'},
                },
            ]
        },
        'params': {**_INDEX_SELECTION, 'local': 'boolean'},
    },
    'indices.exists_template': {
        'documentation': f'{_DOCS}/indices-templates.html',
        'url': {
            'paths': [
                {'path': '/_template/{name}', 'methods': ['HEAD'], 'parts': {'name': 'list'}}
            ]
        },
        'params': {'flat_settings': 'boolean', 'local': 'boolean', 'master_timeout': 'time'},
    },
    'indices.flush': {
        'documentation': f'{_DOCS}/indices-flush.html',
        'url': {
            'paths': [
                {'path': '/_flush', 'methods': ['POST', 'GET']},
                {
                    'path': '/{index}/_flush',
                    'methods': ['POST', 'GET'],
                    'parts': {'index': 'list'},
                },
            ]
        },
        'params': {**_INDEX_SELECTION, 'force': 'boolean', 'wait_if_ongoing': 'boolean'},
    },
    'indices.forcemerge': {
        'documentation': f'{_DOCS}/indices-forcemerge.html',
        'url': {
            'paths': [
                {'path': '/_forcemerge', 'methods': ['POST']},
                {
                    'path': '/{index}/_forcemerge',
                    'methods': ['POST'],
                    'parts': {'index': 'list'},
                },
            ]
        },
        'params': {
            **_INDEX_SELECTION,
            'flush': 'boolean',
            'max_num_segments': 'number',
            'only_expunge_deletes': 'boolean',
        },
    },
    'indices.get': {
        'documentation': f'{_DOCS}/indices-get-index.html',
        'url': {
            'paths': [{'path': '/{index}', 'methods': ['GET'], 'parts': {'index': 'list'}}]
        },
        'params': {
            **_INDEX_SELECTION,
            'flat_settings': 'boolean',
            'include_defaults': 'boolean',
            'include_type_name': 'boolean',
            'local': 'boolean',
            'master_timeout': 'time',
        },
    },
    'indices.get_alias': {
        'documentation': f'{_DOCS}/indices-aliases.html',
        'url': {
            'paths': [
                {'path': '/_alias', 'methods': ['GET']},
                {'path': '/_alias/{name}', 'methods': ['GET'], 'parts': {'name': 'list'}},
                {
                    'path': '/{index}/_alias/{name}',
                    'methods': ['GET'],
                    'parts': {'index': 'list', 'name': 'list'},
                },
                {'path': '/{index}/_alias', 'methods': ['GET'], 'parts': {'index': 'list'}},
            ]
        },
        'params': {**_INDEX_SELECTION, 'local': 'boolean'},
    },
    'indices.get_mapping': {
        'documentation': f'{_DOCS}/indices-get-mapping.html',
        'url': {
            'paths': [
                {'path': '/_mapping', 'methods': ['GET']},
                {'path': '/{index}/_mapping', 'methods': ['GET'], 'parts': {'index': 'list'}},
            ]
        },
        'params': {
            **_INDEX_SELECTION,
            'include_type_name': 'boolean',
            'local': 'boolean',
            'master_timeout': 'time',
        },
    },
    'indices.get_settings': {
        'documentation': f'{_DOCS}/indices-get-settings.html',
        'url': {
            'paths': [
                {'path': '/_settings', 'methods': ['GET']},
                {'path': '/{index}/_settings', 'methods': ['GET'], 'parts': {'index': 'list'}},
                {
                    'path': '/{index}/_settings/{name}',
                    'methods': ['GET'],
                    'parts': {'index': 'list', 'name': 'list'},
                },
                {'path': '/_settings/{name}', 'methods': ['GET'], 'parts': {'name': 'list'}},
            ]
        },
        'params': {
            **_INDEX_SELECTION,
            'flat_settings': 'boolean',
            'include_defaults': 'boolean',
            'local': 'boolean',
            'master_timeout': 'time',
        },
    },
    'indices.get_template': {
        'documentation': f'{_DOCS}/indices-templates.html',
        'url': {
            'paths': [
                {'path': '/_template', 'methods': ['GET']},
                {'path': '/_template/{name}', 'methods': ['GET'], 'parts': {'name': 'list'}},
            ]
        },
        'params': {
            'flat_settings': 'boolean',
            'include_type_name': 'boolean',
            'local': 'boolean',
            'master_timeout': 'time',
        },
    },
    'indices.open': {
        'documentation': f'{_DOCS}/indices-open-close.html',
        'url': {
            'paths': [
                {'path': '/{index}/_open', 'methods': ['POST'], 'parts': {'index': 'list'}}
            ]
        },
        'params': {**_INDEX_SELECTION, **_TIMEOUTS, 'wait_for_active_shards': 'string'},
    },
    'indices.put_alias': {
        'documentation': f'{_DOCS}/indices-aliases.html',
        'url': {
            'paths': [
                {
                    'path': '/{index}/_alias/{name}',
                    'methods': ['PUT', 'POST'],
                    'parts': {'index': 'list', 'name': 'string'},
                },
                {
                    'path': '/{index}/_aliases/{name}',
                    'methods': ['PUT', 'POST'],
                    'parts': {'index': 'list', 'name': 'string'},
                },
            ]
        },
        'params': _TIMEOUTS,
        'body': {'description': 'The settings for the alias, such as `routing` or '
                 '`filter`'},
    },
    'indices.put_mapping': {
        'documentation': f'{_DOCS}/indices-put-mapping.html',
        'url': {
            'paths': [
                {
                    'path': '/{index}/_mapping',
                    'methods': ['PUT', 'POST'],
                    'parts': {'index': 'list'},
                }
            ]
        },
        'params': {**_INDEX_SELECTION, **_TIMEOUTS, 'include_type_name': 'boolean'},
        'body': {'description': 'The mapping definition', 'required': True},
    },
    'indices.put_settings': {
        'documentation': f'{_DOCS}/indices-update-settings.html',
        'url': {
            'paths': [
                {'path': '/_settings', 'methods': ['PUT']},
                {'path': '/{index}/_settings', 'methods': ['PUT'], 'parts': {'index': 'list'}},
            ]
        },
        'params': {
            **_INDEX_SELECTION,
            'flat_settings': 'boolean',
            'master_timeout': 'time',
            'preserve_existing': 'boolean',
            'timeout': 'time',
        },
        'body': {'description': 'The index settings to be updated', 'required': True},
    },
    'indices.put_template': {
        'documentation': f'{_DOCS}/indices-templates.html',
        'url': _paths(('PUT', 'POST'), '/_template/{name}'),
        'params': {
            **_TIMEOUTS,
            'create': 'boolean',
            'flat_settings': 'boolean',
            'include_type_name': 'boolean',
            'order': 'number',
        },
        'body': {'description': 'The template definition', 'required': True},
    },
    'indices.refresh': {
        'documentation': f'{_DOCS}/indices-refresh.html',
        'url': {
            'paths': [
                {'path': '/_refresh', 'methods': ['POST', 'GET']},
                {
                    'path': '/{index}/_refresh',
                    'methods': ['POST', 'GET'],
                    'parts': {'index': 'list'},
                },
            ]
        },
        'params': _INDEX_SELECTION,
    },
    'indices.rollover': {
        'documentation': f'{_DOCS}/indices-rollover-index.html',
        'url': _paths(('POST',), '/{alias}/_rollover', '/{alias}/_rollover/{new_index}'),
        'params': {
            **_TIMEOUTS,
            'dry_run': 'boolean',
            'include_type_name': 'boolean',
            'wait_for_active_shards': 'string',
        },
        'body': {'description': 'The conditions that needs to be met for '
                 'executing rollover'},
    },
    'indices.shrink': {
        'documentation': f'{_DOCS}/indices-shrink-index.html',
        'url': _paths(('PUT', 'POST'), '/{index}/_shrink/{target}'),
        'params': {**_TIMEOUTS, 'wait_for_active_shards': 'string'},
        'body': {'description': 'The configuration for the target index '
                 '(`settings` and `aliases`)'},
    },
    'indices.split': {
        'documentation': f'{_DOCS}/indices-split-index.html',
        'url': _paths(('PUT', 'POST'), '/{index}/_split/{target}'),
        'params': {**_TIMEOUTS, 'wait_for_active_shards': 'string'},
        'body': {'description': 'The configuration for the target index '
                 '(`settings` and `aliases`)'},
    },
    'indices.stats': {
        'documentation': f'{_DOCS}/indices-stats.html',
        'url': {
            'paths': [
                {'path': '/_stats', 'methods': ['GET']},
                {'path': '/_stats/{metric}', 'methods': ['GET'], 'parts': {'metric': 'list'}},
                {'path': '/{index}/_stats', 'methods': ['GET'], 'parts': {'index': 'list'}},
                {
                    'path': '/{index}/_stats/{metric}',
                    'methods': ['GET'],
                    'parts': {'index': 'list', 'metric': 'list'},
                },
            ]
        },
        'params': {
            'completion_fields': 'list',
            'expand_wildcards': 'enum',
            'fielddata_fields': 'list',
            'fields': 'list',
            'forbid_closed_indices': 'boolean',
            'groups': 'list',
            'include_segment_file_sizes': 'boolean',
            'include_unloaded_segments': 'boolean',
            'level': 'enum',
        },
    },
    'indices.update_aliases': {
        'documentation': f'{_DOCS}/indices-aliases.html',
        'url': _paths(('POST',), '/_aliases'),
        'params': _TIMEOUTS,
        'body': {'description': 'The definition of `actions` to perform', 'required': True},
    },
    'indices.validate_query': {
        'documentation': f'{_DOCS}/search-validate.html',
        'url': {
            'paths': [
                {'path': '/_validate/query', 'methods': ['GET', 'POST']},
                {
                    'path': '/{index}/_validate/query',
                    'methods': ['GET', 'POST'],
                    'parts': {'index': 'list'},
                },
                {
                    'path': '/{index}/{type}/_validate/query',
                    'methods': ['GET', 'POST'],
                    'parts': {'index': 'list', 'type': 'list'},
                },
            ]
        },
        'params': {
            'all_shards': 'boolean',
            'allow_no_indices': 'boolean',
            'analyze_wildcard': 'boolean',
            'analyzer': 'string',
            'default_operator': 'enum',
            'df': 'string',
            'expand_wildcards': 'enum',
            'explain': 'boolean',
            'ignore_unavailable': 'boolean',
            'lenient': 'boolean',
            'q': 'string',
            'rewrite': 'boolean',
        },
        'body': {'description': 'The query definition specified with the Query DSL'},
    },
}
