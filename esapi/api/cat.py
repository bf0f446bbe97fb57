"""Compact and aligned text (CAT) endpoints."""

_DOCS = 'https://www.elastic.co/guide/en/elasticsearch/reference/current'

_COMMON = {
    'format': 'string',
    'h': 'list',
    'help': 'boolean',
    's': 'list',
    'v': 'boolean',
}

_LOCAL = {
    'local': 'boolean',
    'master_timeout': 'time',
}


def _cat(name, part=None, part_type='list', params=None, docs=None):
    paths = [{'path': f'/_cat/{name}', 'methods': ['GET']}]
    if part:
        paths.append(
            {
                'path': f'/_cat/{name}/{{{part}}}',
                'methods': ['GET'],
                'parts': {part: part_type},
            }
        )
    return {
        'documentation': f'{_DOCS}/{docs or "cat-" + name.replace("_", "-")}.html',
        'url': {'paths': paths},
        'params': {**_COMMON, **(params or {})},
    }


ENDPOINTS = {
    'cat.aliases': _cat('aliases', 'name', params=_LOCAL),
    'cat.allocation': _cat(
        'allocation', 'node_id', params={**_LOCAL, 'bytes': 'enum'}
    ),
    'cat.count': _cat('count', 'index', params=_LOCAL),
    'cat.fielddata': _cat('fielddata', 'fields', params={'bytes': 'enum'}),
    'cat.health': _cat('health', params={**_LOCAL, 'ts': 'boolean'}),
    'cat.help': {
        'documentation': f'{_DOCS}/cat.html',
        'url': {'paths': [{'path': '/_cat', 'methods': ['GET']}]},
        'params': {'help': 'boolean', 's': 'list'},
    },
    'cat.indices': _cat(
        'indices',
        'index',
        params={
            **_LOCAL,
            'bytes': 'enum',
            'expand_wildcards': 'enum',
            'health': 'enum',
            'include_unloaded_segments': 'boolean',
            'pri': 'boolean',
        },
    ),
    'cat.master': _cat('master', params=_LOCAL),
    'cat.nodeattrs': _cat('nodeattrs', params=_LOCAL),
    'cat.nodes': _cat(
        'nodes', params={**_LOCAL, 'bytes': 'enum', 'full_id': 'boolean'}
    ),
    'cat.pending_tasks': _cat('pending_tasks', params=_LOCAL),
    'cat.plugins': _cat('plugins', params=_LOCAL),
    'cat.recovery': _cat(
        'recovery',
        'index',
        params={'active_only': 'boolean', 'bytes': 'enum', 'detailed': 'boolean'},
    ),
    'cat.repositories': _cat('repositories', params=_LOCAL),
    'cat.segments': _cat('segments', 'index', params={'bytes': 'enum'}),
    'cat.shards': _cat('shards', 'index', params={**_LOCAL, 'bytes': 'enum'}),
    'cat.snapshots': _cat(
        'snapshots',
        'repository',
        params={'ignore_unavailable': 'boolean', 'master_timeout': 'time'},
    ),
    'cat.tasks': _cat(
        'tasks',
        params={
            'actions': 'list',
            'detailed': 'boolean',
            'node_id': 'list',
            'parent_task': 'number',
        },
    ),
    'cat.templates': _cat('templates', 'name', part_type='string', params=_LOCAL),
    'cat.thread_pool': _cat(
        'thread_pool',
        'thread_pool_patterns',
        params={**_LOCAL, 'size': 'enum'},
    ),
}
