"""Ingest pipeline endpoints."""

_DOCS = 'https://www.elastic.co/guide/en/elasticsearch/reference/current'

ENDPOINTS = {
    'ingest.delete_pipeline': {
        'documentation': f'{_DOCS}/delete-pipeline-api.html',
        'url': {'paths': [{'path': '/_ingest/pipeline/{id}', 'methods': ['DELETE']}]},
        'params': {'master_timeout': 'time', 'timeout': 'time'},
    },
    'ingest.get_pipeline': {
        'documentation': f'{_DOCS}/get-pipeline-api.html',
        'url': {
            'paths': [
                {'path': '/_ingest/pipeline', 'methods': ['GET']},
                {'path': '/_ingest/pipeline/{id}', 'methods': ['GET']},
            ]
        },
        'params': {'master_timeout': 'time'},
    },
    'ingest.processor_grok': {
        'documentation': f'{_DOCS}/grok-processor.html#grok-processor-rest-get',
        'url': {'paths': [{'path': '/_ingest/processor/grok', 'methods': ['GET']}]},
    },
    'ingest.put_pipeline': {
        'documentation': f'{_DOCS}/put-pipeline-api.html',
        'url': {'paths': [{'path': '/_ingest/pipeline/{id}', 'methods': ['PUT']}]},
        'params': {'master_timeout': 'time', 'timeout': 'time'},
        'body': {'description': 'The ingest definition', 'required': True},
    },
    'ingest.simulate': {
        'documentation': f'{_DOCS}/simulate-pipeline-api.html',
        'url': {
            'paths': [
                {'path': '/_ingest/pipeline/_simulate', 'methods': ['GET', 'POST']},
                {'path': '/_ingest/pipeline/{id}/_simulate', 'methods': ['GET', 'POST']},
            ]
        },
        'params': {'verbose': 'boolean'},
        'body': {'description': 'The simulate definition', 'required': True},
    },
}
