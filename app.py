import json
import logging
import sqlite3

from flask import Blueprint, Flask, Response, current_app, jsonify, request
from flask_migrate import Migrate
from pydantic import ValidationError
from sqlalchemy import event
from sqlalchemy.engine import Engine
from werkzeug.exceptions import HTTPException

from config import get_config
from constants import VALID_EXPORT_FORMATS, MAX_LENGTHS
from models import db, Recipe, MealPlan, Meal, PantryItem, GroceryList
from models.base import new_id
from schemas import (
    RecipeCreate, RecipeUpdate, MealPlanCreate, MealPlanUpdate, MealCreate,
    PantryItemCreate, PantryItemUpdate, GenerateGroceryListRequest,
    PriceEstimateRequest, GroceryListUpdate,
)
from services import (
    GroceryGenerationClient, GroceryGenerationError, generate_grocery_list,
    generate_grocery_list_ai, estimate_budget, list_summary, meal_sort_key,
    grocery_list_to_csv, grocery_list_to_json,
)
from utils.sanitizer import sanitize_text, sanitize_name, sanitize_url, sanitize_ingredients

logger = logging.getLogger(__name__)

migrate = Migrate()
api = Blueprint('api', __name__, url_prefix='/api')


def parse_body(schema):
    """Validate the JSON request body; ValidationError becomes a 400."""
    return schema.model_validate(request.get_json(silent=True) or {})


# ============================================
# ROUTES - RECIPES
# ============================================

@api.route('/recipes', methods=['GET'])
def recipes_list():
    recipes = Recipe.query.order_by(Recipe.title).all()
    return jsonify({'success': True, 'data': [r.to_dict() for r in recipes]})


@api.route('/recipes', methods=['POST'])
def recipe_add():
    data = parse_body(RecipeCreate)
    recipe = Recipe(
        title=sanitize_name(data.title, MAX_LENGTHS['recipe_title']),
        ingredients=sanitize_ingredients([i.model_dump() for i in data.ingredients]),
        base_servings=data.base_servings,
        instructions=sanitize_text(data.instructions, MAX_LENGTHS['instructions']),
        url=sanitize_url(data.url),
        image_url=sanitize_url(data.image_url),
    )
    db.session.add(recipe)
    db.session.commit()
    logger.info("Created recipe %s (%s)", recipe.id, recipe.title)
    return jsonify({'success': True, 'data': recipe.to_dict()}), 201


@api.route('/recipes/<id>', methods=['GET'])
def recipe_view(id):
    recipe = Recipe.query.get_or_404(id)
    return jsonify({'success': True, 'data': recipe.to_dict()})


@api.route('/recipes/<id>', methods=['PUT'])
def recipe_edit(id):
    recipe = Recipe.query.get_or_404(id)
    data = parse_body(RecipeUpdate)

    if data.title is not None:
        recipe.title = sanitize_name(data.title, MAX_LENGTHS['recipe_title'])
    if data.ingredients is not None:
        recipe.ingredients = sanitize_ingredients([i.model_dump() for i in data.ingredients])
    if data.base_servings is not None:
        recipe.base_servings = data.base_servings
    if data.instructions is not None:
        recipe.instructions = sanitize_text(data.instructions, MAX_LENGTHS['instructions'])
    if data.url is not None:
        recipe.url = sanitize_url(data.url)
    if data.image_url is not None:
        recipe.image_url = sanitize_url(data.image_url)

    db.session.commit()
    return jsonify({'success': True, 'data': recipe.to_dict()})


@api.route('/recipes/<id>', methods=['DELETE'])
def recipe_delete(id):
    recipe = Recipe.query.get_or_404(id)

    # Meals that used this recipe become freeform entries
    Meal.query.filter_by(recipe_id=id).update({'recipe_id': None})

    db.session.delete(recipe)
    db.session.commit()
    return jsonify({'success': True})


# ============================================
# ROUTES - MEAL PLANS
# ============================================

@api.route('/mealplans', methods=['GET'])
def meal_plans_list():
    query = MealPlan.query
    owner_id = request.args.get('owner_id')
    if owner_id:
        query = query.filter_by(owner_id=owner_id)
    plans = query.order_by(MealPlan.start_date.desc()).all()
    return jsonify({'success': True, 'data': [p.to_dict() for p in plans]})


@api.route('/mealplans', methods=['POST'])
def meal_plan_add():
    data = parse_body(MealPlanCreate)
    plan = MealPlan(owner_id=data.owner_id, start_date=data.start_date, end_date=data.end_date)
    db.session.add(plan)
    db.session.commit()
    logger.info("Created meal plan %s (%s to %s)", plan.id, plan.start_date, plan.end_date)
    return jsonify({'success': True, 'data': plan.to_dict()}), 201


@api.route('/mealplans/<id>', methods=['GET'])
def meal_plan_view(id):
    plan = MealPlan.query.get_or_404(id)
    return jsonify({'success': True, 'data': plan.to_dict()})


@api.route('/mealplans/<id>', methods=['PUT'])
def meal_plan_edit(id):
    plan = MealPlan.query.get_or_404(id)
    data = parse_body(MealPlanUpdate)

    start_date = data.start_date or plan.start_date
    end_date = data.end_date or plan.end_date
    if end_date < start_date:
        return jsonify({'error': 'End date must be after or equal to start date'}), 400

    plan.start_date = start_date
    plan.end_date = end_date
    db.session.commit()
    return jsonify({'success': True, 'data': plan.to_dict()})


@api.route('/mealplans/<id>', methods=['DELETE'])
def meal_plan_delete(id):
    plan = MealPlan.query.get_or_404(id)
    # Meals and grocery lists go with the plan (relationship cascade)
    db.session.delete(plan)
    db.session.commit()
    logger.info("Deleted meal plan %s", id)
    return jsonify({'success': True})


# ============================================
# ROUTES - MEALS
# ============================================

@api.route('/mealplans/<id>/meals', methods=['GET'])
def meals_list(id):
    plan = MealPlan.query.get_or_404(id)
    meals = sorted((m.to_dict() for m in plan.meals), key=meal_sort_key)
    return jsonify({'success': True, 'data': meals})


@api.route('/mealplans/<id>/meals', methods=['POST'])
def meal_add(id):
    plan = MealPlan.query.get_or_404(id)
    data = parse_body(MealCreate)

    if not plan.start_date <= data.date <= plan.end_date:
        return jsonify({'error': 'Meal date must fall within the meal plan'}), 400
    if data.recipe_id and not db.session.get(Recipe, data.recipe_id):
        return jsonify({'error': 'Recipe not found'}), 404

    meal = Meal(
        meal_plan_id=plan.id,
        date=data.date,
        meal_time=data.meal_time,
        title=sanitize_name(data.title, MAX_LENGTHS['meal_title']),
        recipe_id=data.recipe_id or None,
        description=sanitize_text(data.description, MAX_LENGTHS['description']) or None,
        servings=data.servings,
    )
    db.session.add(meal)
    db.session.commit()
    return jsonify({'success': True, 'data': meal.to_dict()}), 201


@api.route('/meals/<id>', methods=['DELETE'])
def meal_delete(id):
    meal = Meal.query.get_or_404(id)
    db.session.delete(meal)
    db.session.commit()
    return jsonify({'success': True})


# ============================================
# ROUTES - PANTRY
# ============================================

@api.route('/pantry', methods=['GET'])
def pantry_list():
    query = PantryItem.query
    owner_id = request.args.get('owner_id')
    if owner_id:
        query = query.filter_by(owner_id=owner_id)
    items = query.order_by(PantryItem.item).all()
    return jsonify({'success': True, 'data': [p.to_dict() for p in items]})


@api.route('/pantry', methods=['POST'])
def pantry_add():
    data = parse_body(PantryItemCreate)
    item = PantryItem(
        owner_id=data.owner_id,
        item=sanitize_name(data.item, MAX_LENGTHS['pantry_item']),
        quantity=data.quantity,
        unit=sanitize_name(data.unit, MAX_LENGTHS['unit']),
    )
    db.session.add(item)
    db.session.commit()
    return jsonify({'success': True, 'data': item.to_dict()}), 201


@api.route('/pantry/<id>', methods=['PUT'])
def pantry_edit(id):
    item = PantryItem.query.get_or_404(id)
    data = parse_body(PantryItemUpdate)
    if data.item is not None:
        item.item = sanitize_name(data.item, MAX_LENGTHS['pantry_item'])
    if data.quantity is not None:
        item.quantity = data.quantity
    if data.unit is not None:
        item.unit = sanitize_name(data.unit, MAX_LENGTHS['unit'])
    db.session.commit()
    return jsonify({'success': True, 'data': item.to_dict()})


@api.route('/pantry/<id>', methods=['DELETE'])
def pantry_delete(id):
    item = PantryItem.query.get_or_404(id)
    db.session.delete(item)
    db.session.commit()
    return jsonify({'success': True})


# ============================================
# ROUTES - GROCERY LISTS
# ============================================

@api.route('/mealplans/<id>/grocery-list', methods=['POST'])
def grocery_list_generate(id):
    plan = MealPlan.query.get_or_404(id)
    data = parse_body(GenerateGroceryListRequest)

    meals = [m.to_dict() for m in plan.meals]
    recipe_ids = {m['recipe_id'] for m in meals if m['recipe_id']}
    recipes = {}
    if recipe_ids:
        recipes = {r.id: r.to_dict() for r in Recipe.query.filter(Recipe.id.in_(recipe_ids)).all()}

    if data.pantry_items is not None:
        pantry_items = [p.model_dump() for p in data.pantry_items]
    else:
        pantry_items = [p.to_dict() for p in PantryItem.query.filter_by(owner_id=plan.owner_id).all()]

    unit_system = data.unit_system or current_app.config['DEFAULT_UNIT_SYSTEM']
    plan_data = plan.to_dict()
    if data.use_ai:
        client = current_app.extensions['grocery_generator']
        try:
            grocery_list = generate_grocery_list_ai(
                client, plan_data, meals, recipes, pantry_items, unit_system)
        except GroceryGenerationError as e:
            logger.error("Grocery generation failed for meal plan %s: %s", id, e)
            return jsonify({'error': 'Failed to generate grocery list', 'details': str(e)}), 502
    else:
        grocery_list = generate_grocery_list(
            plan_data, meals, recipes, pantry_items, unit_system)

    saved = GroceryList.from_dict(grocery_list)
    db.session.add(saved)
    db.session.commit()
    return jsonify({'success': True, 'grocery_list': saved.to_dict()}), 201


@api.route('/mealplans/<id>/grocery-list', methods=['GET'])
def grocery_list_latest(id):
    MealPlan.query.get_or_404(id)
    grocery_list = (GroceryList.query.filter_by(meal_plan_id=id)
                    .order_by(GroceryList.created_at.desc())
                    .first())
    if not grocery_list:
        return jsonify({'error': 'No grocery list generated for this meal plan'}), 404
    return jsonify({'success': True, 'grocery_list': grocery_list.to_dict()})


@api.route('/grocery-lists/<id>', methods=['GET'])
def grocery_list_view(id):
    grocery_list = GroceryList.query.get_or_404(id)
    return jsonify({'success': True, 'grocery_list': grocery_list.to_dict()})


@api.route('/grocery-lists/<id>', methods=['PUT'])
def grocery_list_edit(id):
    grocery_list = GroceryList.query.get_or_404(id)
    data = GroceryListUpdate.model_validate_json(request.get_data() or b'{}')

    if data.items is not None:
        items = [item.model_dump() for item in data.items]
        for item in items:
            if not item['id']:
                item['id'] = new_id()
        grocery_list.items = items
        if data.summary is None:
            grocery_list.summary = list_summary(items)
    if data.summary is not None:
        grocery_list.summary = data.summary

    db.session.commit()
    return jsonify({'success': True, 'grocery_list': grocery_list.to_dict()})


@api.route('/grocery-lists/<id>', methods=['DELETE'])
def grocery_list_delete(id):
    grocery_list = GroceryList.query.get_or_404(id)
    db.session.delete(grocery_list)
    db.session.commit()
    return jsonify({'success': True})


# ============================================
# ROUTES - BUDGET AND EXPORT
# ============================================

@api.route('/price-estimates', methods=['POST'])
def price_estimate():
    data = parse_body(PriceEstimateRequest)
    grocery_list = db.session.get(GroceryList, data.grocery_list_id)
    if not grocery_list:
        return jsonify({'error': 'Grocery list not found'}), 404

    budget = estimate_budget(
        grocery_list.to_dict(),
        manual_overrides=data.manual_overrides,
        store=data.store,
        tax_rate=current_app.config['TAX_RATE'],
    )
    return jsonify({'success': True, 'budget': budget})


@api.route('/exports/grocery-list/<id>', methods=['GET'])
def grocery_list_export(id):
    export_format = request.args.get('format', 'json')
    if export_format not in VALID_EXPORT_FORMATS:
        return jsonify({'error': 'Invalid format. Use ?format=json or ?format=csv'}), 400

    grocery_list = GroceryList.query.get_or_404(id)
    filename = f"grocery-list-{id}.{export_format}"
    headers = {'Content-Disposition': f'attachment; filename="{filename}"'}

    if export_format == 'csv':
        return Response(grocery_list_to_csv(grocery_list.to_dict()),
                        mimetype='text/csv', headers=headers)
    return Response(grocery_list_to_json(grocery_list.to_dict()),
                    mimetype='application/json', headers=headers)


# ============================================
# ERROR HANDLERS
# ============================================

def register_error_handlers(app):
    @app.errorhandler(ValidationError)
    def handle_validation_error(e):
        details = json.loads(e.json(include_url=False))
        return jsonify({'error': 'Invalid request body', 'details': details}), 400

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({'error': e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        db.session.rollback()
        return jsonify({'error': 'Internal server error'}), 500


# ============================================
# INITIALIZE APP AND DATABASE
# ============================================

# Enable SQLite foreign key enforcement (registered once per process)
@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def init_db(app):
    with app.app_context():
        db.create_all()


def create_app(env=None, generator=None):
    """
    Build the Flask application.

    Args:
        env: Config name ('development', 'production', 'testing')
        generator: Optional GroceryGenerationClient replacement (tests)
    """
    app = Flask(__name__)
    app.config.from_object(get_config(env))

    logging.basicConfig(
        level=app.config['LOG_LEVEL'],
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    db.init_app(app)
    migrate.init_app(app, db)
    app.extensions['grocery_generator'] = generator or GroceryGenerationClient.from_config(app.config)

    app.register_blueprint(api)
    register_error_handlers(app)
    return app


if __name__ == '__main__':
    app = create_app()
    init_db(app)
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=True, host='0.0.0.0', port=5000, use_reloader=False)
