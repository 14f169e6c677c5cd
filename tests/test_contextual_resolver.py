"""
Tests for contextual action chaining.
"""
import pytest

from action_binding.context import ContextualResolver
from action_binding.exceptions import InvalidArgumentError
from action_binding.schema import ActionFactory, ActionInstance, ActionSchema


@pytest.fixture
def contextual():
    return ContextualResolver()


class TestContextualChecks:
    """Tests for is_contextual and can_start_without_context."""

    def test_is_contextual(self, contextual, book_flight, change_date):
        """Test that only schemas with a parent are contextual."""
        assert not contextual.is_contextual(book_flight)
        assert contextual.is_contextual(change_date)
        assert contextual.is_contextual(ActionInstance(change_date))

    def test_can_start_without_context(self, contextual, book_flight, change_date, change_destination):
        """Test the start-alone rules."""
        assert contextual.can_start_without_context(book_flight)
        assert contextual.can_start_without_context(change_date)
        assert not contextual.can_start_without_context(change_destination)


class TestContextualPairing:
    """Tests for is_valid_contextual_pairing."""

    def test_declared_parent_is_attached(self, contextual, book_flight, change_date):
        """Test that the declared parent schema pairs and attaches."""
        flight = ActionInstance(book_flight)
        child = ActionInstance(change_date)
        
        assert contextual.is_valid_contextual_pairing(child, flight)
        assert child.context is flight

    def test_other_parent_is_rejected(self, contextual, change_date, find_hotel):
        """Test that any other schema is not a valid parent."""
        child = ActionInstance(change_date)
        
        assert not contextual.is_valid_contextual_pairing(child, ActionInstance(find_hotel))
        assert child.context is None

    def test_no_subtype_acceptance(self, contextual, book_flight, change_date):
        """Test that a look-alike schema with another intent is rejected."""
        lookalike = ActionSchema(
            intent_name="BookCheapFlight",
            parameters=book_flight.parameters,
        )
        child = ActionInstance(change_date)
        
        assert not contextual.is_valid_contextual_pairing(child, ActionInstance(lookalike))

    def test_non_contextual_child(self, contextual, book_flight, find_hotel):
        """Test that a non-contextual action never pairs."""
        assert not contextual.is_valid_contextual_pairing(
            ActionInstance(find_hotel), ActionInstance(book_flight)
        )

    def test_validated_parent_is_never_replaced(self, contextual, book_flight, change_date):
        """Test that a paired child keeps its parent."""
        first = ActionInstance(book_flight)
        second = ActionInstance(book_flight)
        child = ActionInstance(change_date)
        contextual.is_valid_contextual_pairing(child, first)
        
        assert not contextual.is_valid_contextual_pairing(child, second)
        assert child.context is first
        assert contextual.is_valid_contextual_pairing(child, first)

    def test_missing_arguments(self, contextual, change_date):
        """Test argument validation."""
        with pytest.raises(InvalidArgumentError):
            contextual.is_valid_contextual_pairing(ActionInstance(change_date), None)


class TestSyntheticParent:
    """Tests for build_synthetic_parent."""

    def test_builds_declared_parent(self, contextual, change_date):
        """Test that a default parent is created and paired."""
        child = ActionInstance(change_date)
        
        parent, intent_name = contextual.build_synthetic_parent(child)
        
        assert intent_name == "BookFlight"
        assert parent.schema == change_date.parent_schema
        assert parent.values == {}
        assert child.context is parent

    def test_non_contextual_has_no_parent(self, contextual, find_hotel):
        """Test that non-contextual actions get (None, None)."""
        assert contextual.build_synthetic_parent(ActionInstance(find_hotel)) == (None, None)

    def test_builds_whole_chain(self, change_date):
        """Test that contextual parents get their own parents, bottom-up."""
        seat = ActionSchema(intent_name="PickSeat", parent_schema=change_date)
        factory = ActionFactory()
        contextual = ContextualResolver(factory)
        child = ActionInstance(seat)
        
        parent, intent_name = contextual.build_synthetic_parent(child)
        
        assert intent_name == "ChangeFlightDate"
        assert parent.context is not None
        assert parent.context.intent_name == "BookFlight"

    def test_uses_factory(self, change_date):
        """Test that parents come from the action factory."""
        class FlightAction(ActionInstance):
            pass

        factory = ActionFactory()
        factory.register_constructor("BookFlight", FlightAction)
        
        parent, _ = ContextualResolver(factory).build_synthetic_parent(ActionInstance(change_date))
        
        assert isinstance(parent, FlightAction)


class TestUpdateIfValidContextualAction:
    """Tests for update_if_valid_contextual_action."""

    def test_non_contextual_current_action_accepts(self, contextual, book_flight, find_hotel):
        """Test that anything is accepted while a root action is in progress."""
        accepted, is_contextual = contextual.update_if_valid_contextual_action(
            ActionInstance(find_hotel), ActionInstance(book_flight)
        )
        
        assert accepted
        assert not is_contextual

    def test_sibling_chains_onto_grandparent(self, contextual, book_flight, change_date, change_destination):
        """Test that a sibling contextual action pairs with the current action's parent."""
        flight = ActionInstance(book_flight)
        current = ActionInstance(change_date)
        contextual.is_valid_contextual_pairing(current, flight)
        sibling = ActionInstance(change_destination)
        
        accepted, is_contextual = contextual.update_if_valid_contextual_action(sibling, current)
        
        assert accepted
        assert is_contextual
        assert sibling.context is flight

    def test_unrelated_action_rejected(self, contextual, book_flight, change_date, find_hotel):
        """Test that a non-contextual action is not chained onto the grandparent."""
        current = ActionInstance(change_date)
        contextual.is_valid_contextual_pairing(current, ActionInstance(book_flight))
        
        accepted, is_contextual = contextual.update_if_valid_contextual_action(
            ActionInstance(find_hotel), current
        )
        
        assert not accepted
        assert not is_contextual
