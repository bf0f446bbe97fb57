"""Cluster level endpoints."""

_DOCS = 'https://www.elastic.co/guide/en/elasticsearch/reference/current'

_TIMEOUTS = {
    'master_timeout': 'time',
    'timeout': 'time',
}

ENDPOINTS = {
    'cluster.allocation_explain': {
        'documentation': f'{_DOCS}/cluster-allocation-explain.html',
        'url': {
            'paths': [
                {'path': '/_cluster/allocation/explain', 'methods': ['GET', 'POST']}
            ]
        },
        'params': {
            'include_disk_info': 'boolean',
            'include_yes_decisions': 'boolean',
        },
        'body': {
            'description': "The index, shard, and primary flag to explain. Empty "
            "means 'explain the first unassigned shard'"
        },
    },
    'cluster.get_settings': {
        'documentation': f'{_DOCS}/cluster-update-settings.html',
        'url': {'paths': [{'path': '/_cluster/settings', 'methods': ['GET']}]},
        'params': {
            **_TIMEOUTS,
            'flat_settings': 'boolean',
            'include_defaults': 'boolean',
        },
    },
    'cluster.health': {
        'documentation': f'{_DOCS}/cluster-health.html',
        'url': {
            'paths': [
                {'path': '/_cluster/health', 'methods': ['GET']},
                {
                    'path': '/_cluster/health/{index}',
                    'methods': ['GET'],
                    'parts': {'index': 'list'},
                },
            ]
        },
        'params': {
            **_TIMEOUTS,
            'expand_wildcards': 'enum',
            'level': 'enum',
            'local': 'boolean',
            'wait_for_active_shards': 'string',
            'wait_for_events': 'enum',
            'wait_for_no_initializing_shards': 'boolean',
            'wait_for_no_relocating_shards': 'boolean',
            'wait_for_nodes': 'string',
            'wait_for_status': 'enum',
        },
    },
    'cluster.pending_tasks': {
        'documentation': f'{_DOCS}/cluster-pending.html',
        'url': {'paths': [{'path': '/_cluster/pending_tasks', 'methods': ['GET']}]},
        'params': {'local': 'boolean', 'master_timeout': 'time'},
    },
    'cluster.put_settings': {
        'documentation': f'{_DOCS}/cluster-update-settings.html',
        'url': {'paths': [{'path': '/_cluster/settings', 'methods': ['PUT']}]},
        'params': {**_TIMEOUTS, 'flat_settings': 'boolean'},
        'body': {
            'description': 'The settings to be updated. Can be either `transient` '
            'or `persistent` (survives cluster restart).',
            'required': True,
        },
    },
    'cluster.remote_info': {
        'documentation': f'{_DOCS}/cluster-remote-info.html',
        'url': {'paths': [{'path': '/_remote/info', 'methods': ['GET']}]},
    },
    'cluster.reroute': {
        'documentation': f'{_DOCS}/cluster-reroute.html',
        'url': {'paths': [{'path': '/_cluster/reroute', 'methods': ['POST']}]},
        'params': {
            **_TIMEOUTS,
            'dry_run': 'boolean',
            'explain': 'boolean',
            'metric': 'list',
            'retry_failed': 'boolean',
        },
        'body': {'description': 'The definition of `commands` to perform (`move`, '
                 '`cancel`, `allocate`)'},
    },
    'cluster.state': {
        'documentation': f'{_DOCS}/cluster-state.html',
        'url': {
            'paths': [
                {'path': '/_cluster/state', 'methods': ['GET']},
                {
                    'path': '/_cluster/state/{metric}',
                    'methods': ['GET'],
                    'parts': {'metric': 'list'},
                },
                {
                    'path': '/_cluster/state/{metric}/{index}',
                    'methods': ['GET'],
                    'parts': {'metric': 'list', 'index': 'list'},
                },
            ]
        },
        'params': {
            'allow_no_indices': 'boolean',
            'expand_wildcards': 'enum',
            'flat_settings': 'boolean',
            'ignore_unavailable': 'boolean',
            'local': 'boolean',
            'master_timeout': 'time',
            'wait_for_metadata_version': 'number',
            'wait_for_timeout': 'time',
        },
    },
    'cluster.stats': {
        'documentation': f'{_DOCS}/cluster-stats.html',
        'url': {
            'paths': [
                {'path': '/_cluster/stats', 'methods': ['GET']},
                {
                    'path': '/_cluster/stats/nodes/{node_id}',
                    'methods': ['GET'],
                    'parts': {'node_id': 'list'},
                },
            ]
        },
        'params': {'flat_settings': 'boolean', 'timeout': 'time'},
    },
}
