"""Machine learning anomaly detection endpoints."""

_DOCS = 'https://www.elastic.co/guide/en/elasticsearch/reference/current'

_JOBS = '/_ml/anomaly_detectors'
_DATAFEEDS = '/_ml/datafeeds'


def _post(path):
    return {'paths': [{'path': path, 'methods': ['POST']}]}


ENDPOINTS = {
    'ml.close_job': {
        'documentation': f'{_DOCS}/ml-close-job.html',
        'url': _post(f'{_JOBS}/{{job_id}}/_close'),
        'params': {
            'allow_no_jobs': 'boolean',
            'force': 'boolean',
            'timeout': 'time',
        },
        'body': {'description': 'The URL params optionally sent in the body'},
    },
    'ml.delete_job': {
        'documentation': f'{_DOCS}/ml-delete-job.html',
        'url': {'paths': [{'path': f'{_JOBS}/{{job_id}}', 'methods': ['DELETE']}]},
        'params': {'force': 'boolean', 'wait_for_completion': 'boolean'},
    },
    'ml.flush_job': {
        'documentation': f'{_DOCS}/ml-flush-job.html',
        'url': _post(f'{_JOBS}/{{job_id}}/_flush'),
        'params': {
            'advance_time': 'string',
            'calc_interim': 'boolean',
            'end': 'string',
            'skip_time': 'string',
            'start': 'string',
        },
        'body': {'description': 'Flush parameters'},
    },
    'ml.get_buckets': {
        'documentation': f'{_DOCS}/ml-get-bucket.html',
        'url': {
            'paths': [
                {
                    'path': f'{_JOBS}/{{job_id}}/results/buckets/{{timestamp}}',
                    'methods': ['GET', 'POST'],
                },
                {
                    'path': f'{_JOBS}/{{job_id}}/results/buckets',
                    'methods': ['GET', 'POST'],
                },
            ]
        },
        'params': {
            'anomaly_score': 'number',
            'desc': 'boolean',
            'end': 'string',
            'exclude_interim': 'boolean',
            'expand': 'boolean',
            'from': 'number',
            'size': 'number',
            'sort': 'string',
            'start': 'string',
        },
        'body': {'description': 'Bucket selection details if not provided in URI'},
    },
    'ml.get_datafeeds': {
        'documentation': f'{_DOCS}/ml-get-datafeed.html',
        'url': {
            'paths': [
                {'path': _DATAFEEDS, 'methods': ['GET']},
                {'path': f'{_DATAFEEDS}/{{datafeed_id}}', 'methods': ['GET']},
            ]
        },
        'params': {'allow_no_datafeeds': 'boolean'},
    },
    'ml.get_jobs': {
        'documentation': f'{_DOCS}/ml-get-job.html',
        'url': {
            'paths': [
                {'path': _JOBS, 'methods': ['GET']},
                {'path': f'{_JOBS}/{{job_id}}', 'methods': ['GET']},
            ]
        },
        'params': {'allow_no_jobs': 'boolean'},
    },
    'ml.info': {
        'documentation': f'{_DOCS}/get-ml-info.html',
        'url': {'paths': [{'path': '/_ml/info', 'methods': ['GET']}]},
    },
    'ml.open_job': {
        'documentation': f'{_DOCS}/ml-open-job.html',
        'url': _post(f'{_JOBS}/{{job_id}}/_open'),
    },
    'ml.put_job': {
        'documentation': f'{_DOCS}/ml-put-job.html',
        'url': {'paths': [{'path': f'{_JOBS}/{{job_id}}', 'methods': ['PUT']}]},
        'body': {'description': 'The job', 'required': True},
    },
    'ml.start_datafeed': {
        'documentation': f'{_DOCS}/ml-start-datafeed.html',
        'url': _post(f'{_DATAFEEDS}/{{datafeed_id}}/_start'),
        'params': {'end': 'string', 'start': 'string', 'timeout': 'time'},
        'body': {'description': 'The start datafeed parameters'},
    },
    'ml.stop_datafeed': {
        'documentation': f'{_DOCS}/ml-stop-datafeed.html',
        'url': _post(f'{_DATAFEEDS}/{{datafeed_id}}/_stop'),
        'params': {
            'allow_no_datafeeds': 'boolean',
            'force': 'boolean',
            'timeout': 'time',
        },
    },
}
