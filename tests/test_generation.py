"""
AI grocery generation tests. The HTTP session is mocked; nothing leaves the process.
Run with: pytest tests/test_generation.py
"""

import sys
import os
import json
from unittest import mock

import pytest
import requests

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services import GroceryGenerationClient, GroceryGenerationError, generate_grocery_list_ai
from services.generation import build_generation_payload, parse_generated_items

PLAN = {'id': 'plan-1', 'start_date': '2024-01-01', 'end_date': '2024-01-03'}
RECIPES = {'r1': {'id': 'r1', 'title': 'Salad', 'ingredients': [
    {'name': 'tomato', 'amount': 2, 'unit': 'units'}]}}
MEALS = [
    {'id': 'm2', 'date': '2024-01-02', 'meal_time': 'lunch', 'title': 'Salad',
     'recipe_id': 'r1', 'description': None, 'servings': 3},
    {'id': 'm1', 'date': '2024-01-01', 'meal_time': 'dinner', 'title': 'Takeout tacos',
     'recipe_id': None, 'description': 'Tacos from the truck', 'servings': 2},
]


def generated_item(**overrides):
    item = {
        'name': 'tomato',
        'display_name': 'Tomatoes',
        'quantity': 6.0,
        'unit': 'units',
        'category': 'Produce',
        'from_recipes': [{'recipe_id': 'r1', 'meal_date': '2024-01-02', 'servings': 3.0}],
        'estimated_price': 3.5,
        'optional': False,
    }
    item.update(overrides)
    return item


def make_client(content=None, envelope=None, post_error=None, status_error=None, api_key='test-key'):
    response = mock.Mock()
    if envelope is None:
        envelope = {'choices': [{'message': {'content': content}}]}
    response.json.return_value = envelope
    if status_error:
        response.raise_for_status.side_effect = status_error

    session = mock.Mock()
    session.post.return_value = response
    if post_error:
        session.post.side_effect = post_error

    client = GroceryGenerationClient(api_key, 'test-model', 'https://llm.example/v1/chat/completions',
                                     timeout=5, session=session)
    return client, session


def test_successful_generation():
    client, session = make_client(json.dumps({'items': [generated_item()]}))

    result = generate_grocery_list_ai(client, PLAN, MEALS, RECIPES, [], 'metric')

    assert result['meal_plan_id'] == 'plan-1'
    assert result['meta']['unit_system'] == 'metric'
    item = result['items'][0]
    assert item['id']
    assert item['name'] == 'tomato'
    assert item['display_name'] == 'Tomatoes'
    assert item['category'] == 'produce'
    assert item['from_recipes'][0]['recipe_id'] == 'r1'
    assert result['summary'] == {'total_items': 1, 'estimated_total': 3.5}

    kwargs = session.post.call_args.kwargs
    assert kwargs['timeout'] == 5
    assert kwargs['headers']['Authorization'] == 'Bearer test-key'
    assert kwargs['json']['model'] == 'test-model'
    assert '"unit_system": "metric"' in kwargs['json']['messages'][1]['content']


def test_missing_field_fails_generation():
    item = generated_item()
    del item['optional']
    client, _ = make_client(json.dumps({'items': [item]}))
    with pytest.raises(GroceryGenerationError):
        generate_grocery_list_ai(client, PLAN, MEALS, RECIPES)


def test_wrong_type_fails_generation():
    client, _ = make_client(json.dumps({'items': [generated_item(quantity='6')]}))
    with pytest.raises(GroceryGenerationError):
        generate_grocery_list_ai(client, PLAN, MEALS, RECIPES)


def test_negative_quantity_fails_generation():
    client, _ = make_client(json.dumps({'items': [generated_item(quantity=-1.0)]}))
    with pytest.raises(GroceryGenerationError):
        generate_grocery_list_ai(client, PLAN, MEALS, RECIPES)


def test_non_json_reply_fails_generation():
    with pytest.raises(GroceryGenerationError):
        parse_generated_items('Sure! Here is your list: tomatoes')


def test_timeout_fails_generation():
    client, _ = make_client(post_error=requests.Timeout('read timed out'))
    with pytest.raises(GroceryGenerationError) as exc_info:
        generate_grocery_list_ai(client, PLAN, MEALS, RECIPES)
    assert 'timed out' in str(exc_info.value)


def test_http_error_fails_generation():
    client, _ = make_client('{}', status_error=requests.HTTPError('500 Server Error'))
    with pytest.raises(GroceryGenerationError):
        generate_grocery_list_ai(client, PLAN, MEALS, RECIPES)


def test_bad_envelope_fails_generation():
    client, _ = make_client(envelope={'error': 'overloaded'})
    with pytest.raises(GroceryGenerationError):
        generate_grocery_list_ai(client, PLAN, MEALS, RECIPES)


def test_empty_reply_fails_generation():
    client, _ = make_client('')
    with pytest.raises(GroceryGenerationError):
        generate_grocery_list_ai(client, PLAN, MEALS, RECIPES)


def test_unconfigured_client_never_calls_out():
    client, session = make_client('{}', api_key='')
    with pytest.raises(GroceryGenerationError):
        generate_grocery_list_ai(client, PLAN, MEALS, RECIPES)
    session.post.assert_not_called()


def test_payload_orders_meals_and_embeds_recipes():
    pantry = [{'id': 'p1', 'item': 'eggs', 'quantity': 6, 'unit': 'count'}]
    payload = build_generation_payload(PLAN, MEALS, RECIPES, pantry, 'imperial')

    assert payload['date_range'] == {'start': '2024-01-01', 'end': '2024-01-03'}
    assert [m['date'] for m in payload['meals']] == ['2024-01-01', '2024-01-02']
    assert payload['meals'][0]['recipe'] is None
    assert payload['meals'][0]['description'] == 'Tacos from the truck'
    assert payload['meals'][1]['recipe'] == RECIPES['r1']
    assert payload['pantry'] == [{'item': 'eggs', 'quantity': 6, 'unit': 'count'}]
    assert payload['unit_system'] == 'imperial'


def test_client_from_config():
    client = GroceryGenerationClient.from_config({
        'OPENAI_API_KEY': 'k',
        'OPENAI_MODEL': 'm',
        'OPENAI_API_URL': 'https://llm.example',
        'GENERATION_TIMEOUT': 12,
    })
    assert client.api_key == 'k'
    assert client.timeout == 12


def test_references_to_unknown_meals_are_dropped():
    sources = [
        {'recipe_id': 'r1', 'meal_date': '2024-01-02', 'servings': 3.0},
        {'recipe_id': 'r1', 'meal_date': '2024-01-05', 'servings': 1.0},
        {'recipe_id': 'made-up', 'meal_date': '2024-01-02', 'servings': 1.0},
    ]
    client, _ = make_client(json.dumps({'items': [generated_item(from_recipes=sources)]}))

    result = generate_grocery_list_ai(client, PLAN, MEALS, RECIPES)

    assert result['items'][0]['from_recipes'] == [sources[0]]
