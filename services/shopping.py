"""
Shopping List Service

Functions for consolidating expanded recipe ingredients into a single
grocery list and assembling the list document that gets persisted.
"""

import logging
import uuid
from collections import Counter
from datetime import datetime, timezone

from constants import DEFAULT_UNIT_SYSTEM, UNIT_SYSTEMS
from .categorize import categorize_items
from .conversion import unit_kind, to_canonical, display_unit
from .expansion import expand_meals
from .matching import merge_key, normalize_ingredient_name
from .pantry import reconcile_pantry

logger = logging.getLogger(__name__)


def new_grocery_item(name, quantity, unit, display_name=None, category=None,
                     quantity_in_grams=None, notes=None, from_recipes=None,
                     estimated_price=None, store_suggestions=None, optional=False):
    """Build a grocery item dict with a fresh id."""
    return {
        'id': str(uuid.uuid4()),
        'name': normalize_ingredient_name(name),
        'display_name': display_name or name,
        'quantity': quantity,
        'unit': unit,
        'quantity_in_grams': quantity_in_grams,
        'category': category,
        'notes': notes,
        'from_recipes': list(from_recipes or []),
        'estimated_price': estimated_price,
        'store_suggestions': store_suggestions,
        'optional': optional,
    }


def _measure_note(kind, unit):
    """Note that tells apart lines sharing a name but not a unit."""
    if kind == 'weight':
        return 'by weight'
    if kind == 'volume':
        return 'by volume'
    return f"in {unit}" if unit else 'by count'


def consolidate_ingredients(instances, unit_system=DEFAULT_UNIT_SYSTEM, round_quantities=True):
    """
    Merge expanded ingredient instances into deduplicated grocery items.

    Instances merge when their canonical names match and their units are
    compatible (both weight, both volume, or the same text). Convertible
    quantities are summed in grams/milliliters and presented in the target
    unit system. Incompatible units stay on separate lines, told apart by
    their notes.

    Args:
        instances: Scaled ingredient dicts from expand_recipe/expand_meals,
            in meal processing order
        unit_system: 'imperial' or 'metric'
        round_quantities: Round for display. Pass False when the items
            still go through the pantry, then call present_quantities.

    Returns:
        List of grocery item dicts in first-seen order
    """
    if unit_system not in UNIT_SYSTEMS:
        raise ValueError(f"Unknown unit system: {unit_system!r}")

    consolidated = {}
    for inst in instances:
        key = merge_key(inst['name'], inst['unit'])
        kind = unit_kind(inst['unit'])
        amount = max(inst.get('amount') or 0, 0)
        if kind is not None:
            amount = to_canonical(amount, inst['unit'])[0]

        source = inst.get('source') or {}
        meal_ref = inst.get('meal_id') or (
            source.get('recipe_id'), source.get('meal_date'), source.get('servings'))
        preparation = (inst.get('preparation') or '').strip()

        if key in consolidated:
            entry = consolidated[key]
            entry['total'] += amount
            # Required anywhere means required
            entry['optional'] = entry['optional'] and inst.get('optional', False)
            if meal_ref not in entry['meals']:
                entry['meals'].add(meal_ref)
                entry['from_recipes'].append(dict(source))
            if preparation and preparation not in entry['preparations']:
                entry['preparations'].append(preparation)
        else:
            consolidated[key] = {
                'name': key[0],
                'display_name': inst['name'].strip(),
                'unit': (inst['unit'] or '').strip(),
                'kind': kind,
                'total': amount,
                'optional': bool(inst.get('optional', False)),
                'meals': {meal_ref},
                'from_recipes': [dict(source)],
                'preparations': [preparation] if preparation else [],
            }

    lines_per_name = Counter(key[0] for key in consolidated)

    items = []
    for key, entry in consolidated.items():
        quantity_in_grams = None
        if entry['kind'] is not None:
            quantity, unit = display_unit(entry['total'], entry['kind'], unit_system)
            if entry['kind'] == 'weight':
                quantity_in_grams = entry['total']
        else:
            quantity, unit = entry['total'], entry['unit']

        notes = list(entry['preparations'])
        if lines_per_name[key[0]] > 1:
            notes.append(_measure_note(entry['kind'], entry['unit']))

        items.append(new_grocery_item(
            entry['name'],
            quantity,
            unit,
            display_name=entry['display_name'],
            quantity_in_grams=quantity_in_grams,
            notes='; '.join(notes) or None,
            from_recipes=entry['from_recipes'],
            optional=entry['optional'],
        ))

    if round_quantities:
        present_quantities(items, unit_system)

    logger.debug("Consolidated %d ingredient instances into %d items",
                 len(instances), len(items))
    return items


def present_quantities(items, unit_system=DEFAULT_UNIT_SYSTEM):
    """
    Round quantities to 2 decimals for display (in place).

    Weight and volume lines are first re-expressed in the largest unit of
    the unit system they fill, so a line the pantry cut down to a few grams
    reads "4 g" rather than "0.0 kg".
    """
    for item in items:
        kind = unit_kind(item['unit'])
        if kind is not None:
            base = to_canonical(item['quantity'], item['unit'])[0]
            item['quantity'], item['unit'] = display_unit(base, kind, unit_system)
            if kind == 'weight':
                item['quantity_in_grams'] = round(base, 2)
        item['quantity'] = round(item['quantity'], 2)
    return items


def list_summary(items):
    """Summary block for a grocery list: item count and price total if any."""
    prices = [item['estimated_price'] for item in items
              if item.get('estimated_price') is not None]
    total = sum(prices)
    return {
        'total_items': len(items),
        'estimated_total': round(total, 2) if total > 0 else None,
    }


def build_grocery_list(meal_plan, items, unit_system):
    """Wrap consolidated items in the grocery list document."""
    return {
        'id': str(uuid.uuid4()),
        'meal_plan_id': meal_plan['id'],
        'meta': {
            'generated_at': datetime.now(timezone.utc).isoformat(),
            'date_range': {
                'start': str(meal_plan['start_date']),
                'end': str(meal_plan['end_date']),
            },
            'servings_scale': 1.0,
            'unit_system': unit_system,
        },
        'items': items,
        'summary': list_summary(items),
    }


def generate_grocery_list(meal_plan, meals, recipes, pantry_items=None,
                          unit_system=DEFAULT_UNIT_SYSTEM):
    """
    Generate a grocery list for a meal plan without the AI service.

    Runs expansion, consolidation, pantry reconciliation and
    categorization over data that has already been loaded.

    Args:
        meal_plan: Meal plan dict (id, start_date, end_date)
        meals: Meal dicts belonging to the plan
        recipes: Mapping of recipe id -> recipe dict
        pantry_items: Pantry dicts (item, quantity, unit)
        unit_system: 'imperial' or 'metric'

    Returns:
        Grocery list dict ready to persist
    """
    instances = expand_meals(meals, recipes)
    items = consolidate_ingredients(instances, unit_system, round_quantities=False)
    items = reconcile_pantry(items, pantry_items or [])
    present_quantities(items, unit_system)
    categorize_items(items)

    logger.info("Generated grocery list for meal plan %s: %d meals, %d items",
                meal_plan['id'], len(meals), len(items))
    return build_grocery_list(meal_plan, items, unit_system)
