"""Step definitions for production chain pricing feature"""
import pytest
from pytest_bdd import scenarios, given, when, then, parsers

from colony_economy.domain.planning.chain import (
    build_segment,
    calculate_chain_roi,
    create_chain,
    deserialize_chain,
    increment_age,
    is_viable,
    mark_funded,
    select_within_budget,
    serialize_chain,
    sort_by_profit,
    sort_by_roi,
)
from colony_economy.domain.shared.value_objects import CorpType

scenarios('../../../features/domain/planning/chain.feature')


def _priced_chain(chain_id, cost, mint_value):
    """Two-segment chain whose goal segment ends at the given cost"""
    leaf = build_segment(f"{chain_id}-miner", CorpType.MINING, "energy", 100, 0, 0.1)
    goal = build_segment(f"{chain_id}-goal", CorpType.UPGRADING, "rcl-progress", 1, cost, 0)
    return create_chain(chain_id, [leaf, goal], mint_value)


@given(parsers.parse('a base cost of {cost:d} credits'))
def base_cost(context, cost):
    context['price'] = cost


@when(parsers.parse('it passes through {count:d} corps each charging a margin of {margin:g}'))
def pass_through_corps(context, count, margin):
    price = context['price']
    for i in range(count):
        price = build_segment(f"corp-{i}", CorpType.HAULING, "energy", 1, price, margin).output_price
    context['price'] = price


@then(parsers.parse('the final price should be {price:g}'))
def final_price(context, price):
    assert context['price'] == pytest.approx(price)


@when(parsers.parse('a leaf segment is built with margin {margin:g}'))
def leaf_segment(context, margin):
    context['segment'] = build_segment("miner", CorpType.MINING, "energy", 100, 0, margin)


@then('its output price should be 0')
def output_price_zero(context):
    assert context['segment'].output_price == 0


@given(parsers.parse('a chain costing {cost:d} credits that mints {mint_value:d} credits'))
def chain_costing(context, cost, mint_value):
    context['chain'] = _priced_chain("chain-test", cost, mint_value)


@then(parsers.parse('the chain profit should be {profit:d}'))
def chain_profit(context, profit):
    assert context['chain'].profit == pytest.approx(profit)


@then('the chain should be viable')
def chain_viable(context):
    assert is_viable(context['chain'])


@then('the chain should not be viable')
def chain_not_viable(context):
    assert not is_viable(context['chain'])


@then(parsers.parse('the chain priority should be {priority:d}'))
def chain_priority(context, priority):
    assert context['chain'].priority == pytest.approx(priority)


@then('the chain should not be funded')
def chain_not_funded(context):
    assert context['chain'].funded is False
    assert context['chain'].age == 0


@then('the chain ROI should be 0')
def chain_roi_zero(context):
    assert calculate_chain_roi(context['chain']) == 0


@given(parsers.parse('chains costing {first:d}, {second:d} and {third:d} credits'))
def chains_costing(context, first, second, third):
    context['chains'] = [
        _priced_chain(f"chain-{cost}", cost, 10000)
        for cost in (first, second, third)
    ]


@when(parsers.parse('I select chains within a budget of {budget:d}'))
def select_budget(context, budget):
    context['selected'] = select_within_budget(context['chains'], budget)


@then(parsers.parse('the chains costing {first:d} and {second:d} should be selected'))
def selected_costs(context, first, second):
    assert [chain.total_cost for chain in context['selected']] == [first, second]


@when(parsers.parse('the chain is funded and aged {ticks:d} ticks'))
def fund_and_age(context, ticks):
    context['aged'] = increment_age(mark_funded(context['chain']), ticks)


@when('the chain is serialized and restored')
def serialize_and_restore(context):
    context['restored'] = deserialize_chain(serialize_chain(context['aged']))


@then('the restored chain should equal the aged chain')
def restored_equal(context):
    assert context['restored'] == context['aged']


@then(parsers.parse('the restored chain should be funded with age {age:d}'))
def restored_funded(context, age):
    assert context['restored'].funded is True
    assert context['restored'].age == age


@given(parsers.parse('a chain "{chain_id}" costing {cost:d} credits that mints {mint_value:d} credits'))
def named_chain_costing(context, chain_id, cost, mint_value):
    context.setdefault('chains', []).append(_priced_chain(chain_id, cost, mint_value))


@when('the chains are ranked by profit')
def rank_by_profit(context):
    context['ranked'] = sort_by_profit(context['chains'])


@when('the chains are ranked by ROI')
def rank_by_roi(context):
    context['ranked'] = sort_by_roi(context['chains'])


@then(parsers.parse('the ranking should be "{chain_ids}"'))
def ranking_order(context, chain_ids):
    assert [chain.chain_id for chain in context['ranked']] == chain_ids.split(', ')
