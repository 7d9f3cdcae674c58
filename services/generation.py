"""
AI Grocery Generation Service

Delegates ingredient interpretation to an OpenAI-compatible chat
completions endpoint and validates what comes back against the grocery
item shape. Any failure fails the whole generation; nothing is retried.
"""

import json
import logging

import requests
from pydantic import ValidationError

from schemas import GroceryListResponse
from .categorize import categorize_items
from .expansion import meal_sort_key
from .shopping import build_grocery_list, new_grocery_item

logger = logging.getLogger(__name__)


class GroceryGenerationError(Exception):
    """Raised when the generation service fails or returns an unusable list."""
    pass


SYSTEM_PROMPT = """You are a grocery list generation assistant that MUST output only valid JSON.

Your tasks:
1. Expand recipes into their ingredient lists and scale them by the requested servings
2. Normalize ingredient names and canonicalize units (use the unit_system: "{unit_system}")
3. Merge duplicate ingredients and sum quantities
4. Categorize each item into a grocery category (produce, dairy, meat, spices, pantry, frozen, beverages, household, bakery, etc.)
5. Subtract pantry items from the grocery list where applicable
6. Provide estimated prices in USD where you can

Rules:
- Use canonical ingredient names in "name"; put brands or specifics in "display_name" and "notes"
- Mark ingredients inferred from freeform meal descriptions as optional: true
- Omit estimated_price when uncertain

Return a JSON object of the form:
{{"items": [{{"name": str, "display_name": str, "quantity": number, "unit": str,
"quantity_in_grams": number (optional), "category": str, "notes": str (optional),
"from_recipes": [{{"recipe_id": str, "meal_date": "YYYY-MM-DD", "servings": number}}],
"estimated_price": number (optional), "store_suggestions": [str] (optional),
"optional": bool}}]}}"""


class GroceryGenerationClient:
    """
    Thin client for the generation endpoint.

    Built once from app config and handed to the routes, so tests can swap
    in a double or a mocked session.
    """

    def __init__(self, api_key, model, api_url, timeout=60, session=None):
        self.api_key = api_key
        self.model = model
        self.api_url = api_url
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config):
        return cls(
            api_key=config.get('OPENAI_API_KEY'),
            model=config.get('OPENAI_MODEL'),
            api_url=config.get('OPENAI_API_URL'),
            timeout=config.get('GENERATION_TIMEOUT', 60),
        )

    def complete_json(self, system_prompt, user_prompt):
        """
        Send one chat completion request in JSON mode.

        Returns:
            The raw message content string

        Raises:
            GroceryGenerationError: on missing credentials, transport errors,
                non-2xx responses or an empty reply
        """
        if not self.api_key:
            raise GroceryGenerationError('Generation service is not configured')

        body = {
            'model': self.model,
            'messages': [
                {'role': 'system', 'content': system_prompt},
                {'role': 'user', 'content': user_prompt},
            ],
            'response_format': {'type': 'json_object'},
            'temperature': 0.3,
        }
        headers = {'Authorization': f'Bearer {self.api_key}'}

        try:
            response = self.session.post(self.api_url, json=body, headers=headers,
                                         timeout=self.timeout)
            response.raise_for_status()
            content = response.json()['choices'][0]['message']['content']
        except requests.Timeout as e:
            raise GroceryGenerationError(f'Generation service timed out after {self.timeout}s') from e
        except requests.RequestException as e:
            raise GroceryGenerationError(f'Generation service request failed: {e}') from e
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise GroceryGenerationError('Unexpected response envelope from generation service') from e

        if not content:
            raise GroceryGenerationError('No response from generation service')
        return content


def build_generation_payload(meal_plan, meals, recipes, pantry_items, unit_system):
    """Structured request describing the plan, its recipes and the pantry."""
    return {
        'date_range': {
            'start': str(meal_plan['start_date']),
            'end': str(meal_plan['end_date']),
        },
        'meals': [
            {
                'date': str(meal['date']),
                'meal_time': meal['meal_time'],
                'title': meal['title'],
                'recipe': recipes.get(meal.get('recipe_id')) if meal.get('recipe_id') else None,
                'description': meal.get('description'),
                'servings': meal.get('servings') or 1,
            }
            for meal in sorted(meals, key=meal_sort_key)
        ],
        'pantry': [
            {'item': p['item'], 'quantity': p['quantity'], 'unit': p['unit']}
            for p in pantry_items
        ],
        'unit_system': unit_system,
    }


def parse_generated_items(content):
    """
    Validate the service's JSON reply and turn it into grocery item dicts.

    Raises:
        GroceryGenerationError: if the reply is not JSON or any item is
            missing a required field or has the wrong type
    """
    try:
        parsed = GroceryListResponse.model_validate_json(content)
    except ValidationError as e:
        logger.error("Generation response failed validation: %s", e)
        raise GroceryGenerationError('Invalid response format from generation service') from e

    items = []
    for item in parsed.items:
        items.append(new_grocery_item(
            item.name,
            item.quantity,
            item.unit,
            display_name=item.display_name,
            category=item.category,
            quantity_in_grams=item.quantity_in_grams,
            notes=item.notes,
            from_recipes=[source.model_dump() for source in item.from_recipes],
            estimated_price=item.estimated_price,
            store_suggestions=item.store_suggestions,
            optional=item.optional,
        ))
    return items


def drop_unknown_sources(items, meals):
    """
    Keep only provenance entries that point at a recipe-backed meal of the
    plan (same recipe id and date). Items themselves are kept (in place).
    """
    known = {(meal.get('recipe_id'), str(meal.get('date')))
             for meal in meals if meal.get('recipe_id')}
    for item in items:
        kept = [source for source in item['from_recipes']
                if (source['recipe_id'], source['meal_date']) in known]
        if len(kept) != len(item['from_recipes']):
            logger.warning("Dropped %d unknown meal references from %s",
                           len(item['from_recipes']) - len(kept), item['name'])
        item['from_recipes'] = kept
    return items


def generate_grocery_list_ai(client, meal_plan, meals, recipes, pantry_items=None,
                             unit_system='imperial'):
    """
    Generate a grocery list through the AI service.

    Args:
        client: GroceryGenerationClient
        meal_plan: Meal plan dict (id, start_date, end_date)
        meals: Meal dicts belonging to the plan
        recipes: Mapping of recipe id -> recipe dict
        pantry_items: Pantry dicts (item, quantity, unit)
        unit_system: 'imperial' or 'metric'

    Returns:
        Grocery list dict ready to persist

    Raises:
        GroceryGenerationError: if the call or validation fails
    """
    payload = build_generation_payload(meal_plan, meals, recipes, pantry_items or [], unit_system)
    user_prompt = (
        "Generate a grocery list for this meal plan:\n\n"
        f"{json.dumps(payload, indent=2, default=str)}\n\n"
        "Return only the JSON object."
    )

    logger.info("Requesting AI grocery list for meal plan %s (%d meals)",
                meal_plan['id'], len(meals))
    content = client.complete_json(SYSTEM_PROMPT.format(unit_system=unit_system), user_prompt)

    items = parse_generated_items(content)
    drop_unknown_sources(items, meals)
    categorize_items(items)
    return build_grocery_list(meal_plan, items, unit_system)
