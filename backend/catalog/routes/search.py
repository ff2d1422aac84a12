from flask import Blueprint, current_app, jsonify, request
from catalog import get_product_service

search_bp = Blueprint('search', __name__)


@search_bp.route('/', methods=['GET'])
def search_products():
    """
    搜索商品

    Query Parameters:
    - q: 名称关键词（不区分大小写）
    - category: 分类 (Electronics/Sports/Home)
    - min_price / max_price: 价格区间（含边界）
    - start_date / end_date: 日期区间 YYYY-MM-DD（含边界）
    - sort: 排序方式 (name/price/date)，缺省保持原顺序

    无法解析的参数按“未指定”处理。
    """
    try:
        results = get_product_service().search_products(request.args)
        return jsonify({
            'success': True,
            'data': results['products'],
            'total': results['total'],
            'criteria': results['criteria'],
            'message': '搜索成功'
        })
    except Exception as e:
        current_app.logger.exception("Search failed: %s", e)
        return jsonify({
            'success': False,
            'data': [],
            'message': str(e)
        }), 500
