#!/usr/bin/python
# -*- coding: utf-8 -*-

DOCUMENTATION = r'''
module: state_compare
short_description: Compare a response with a desired state.
description:
    - Decides whether a response already matches a desired body, without
    - sending any request.
    - When both bodies are JSON objects, the compare type selects the
    - strategy. When neither is, the desired body must be a substring of the
    - response body. A mix of both fails.
    - The response status must be 2xx for the states to be synced.
options:
  response:
    description:
      - The response to compare.
    required: true
    type: dict
    suboptions:
      status_code:
        type: int
      body:
        type: str
      headers:
        type: dict
  desired:
    description:
      - The desired body.
    required: true
    type: str
  compare_type:
    description:
      - The comparison strategy.
    type: str
    default: ''
'''

EXAMPLES = r'''
- name: Check a Harbor robot account.
  declarative.httpstate.state_compare:
    response:
      status_code: 200
      body: '{"name": "r1", "update_time": "t2"}'
    desired: '{"name": "r1", "secret": "x", "update_time": "t1"}'
    compare_type: harbor-robot
  register: compare_res
'''
