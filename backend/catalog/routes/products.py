from flask import Blueprint, current_app, jsonify, request
from catalog import get_product_service
from catalog.services.product_validation import ProductValidationError

products_bp = Blueprint('products', __name__)


def _server_error(e, data=None):
    current_app.logger.exception("Product request failed: %s", e)
    return jsonify({
        'success': False,
        'data': data,
        'message': str(e)
    }), 500


def _not_found():
    return jsonify({
        'success': False,
        'data': None,
        'message': '产品不存在'
    }), 404


def _invalid(e: ProductValidationError):
    return jsonify({
        'success': False,
        'data': None,
        'errors': e.errors,
        'message': str(e)
    }), 400


@products_bp.route('/', methods=['GET'])
def list_products():
    """获取全部商品（按添加顺序）"""
    try:
        products = get_product_service().list_products()
        return jsonify({
            'success': True,
            'data': products,
            'message': '获取商品列表成功'
        })
    except Exception as e:
        return _server_error(e, data=[])


@products_bp.route('/<int:product_id>', methods=['GET'])
def get_product_detail(product_id):
    """获取商品详情"""
    try:
        product = get_product_service().get_product(product_id)
        if product:
            return jsonify({
                'success': True,
                'data': product,
                'message': '获取商品详情成功'
            })
        return _not_found()
    except Exception as e:
        return _server_error(e)


@products_bp.route('/', methods=['POST'])
def create_product():
    """新增商品"""
    try:
        raw = request.get_json(silent=True) or {}
        product = get_product_service().create_product(raw)
        return jsonify({
            'success': True,
            'data': product,
            'message': '商品已创建'
        }), 201
    except ProductValidationError as e:
        return _invalid(e)
    except Exception as e:
        return _server_error(e)


@products_bp.route('/<int:product_id>', methods=['PUT'])
def update_product(product_id):
    """整体替换商品"""
    try:
        raw = request.get_json(silent=True) or {}
        product = get_product_service().update_product(product_id, raw)
        if product is None:
            return _not_found()
        return jsonify({
            'success': True,
            'data': product,
            'message': '商品已更新'
        })
    except ProductValidationError as e:
        return _invalid(e)
    except Exception as e:
        return _server_error(e)


@products_bp.route('/<int:product_id>', methods=['DELETE'])
def delete_product(product_id):
    """删除商品"""
    try:
        if not get_product_service().delete_product(product_id):
            return _not_found()
        return jsonify({
            'success': True,
            'data': {'id': product_id},
            'message': '商品已删除'
        })
    except Exception as e:
        return _server_error(e)


@products_bp.route('/categories', methods=['GET'])
def get_categories():
    """获取所有分类"""
    return jsonify({
        'success': True,
        'data': get_product_service().get_categories(),
        'message': '获取分类成功'
    })
