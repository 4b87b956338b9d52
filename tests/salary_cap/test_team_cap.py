"""
Unit Tests for TeamCapProjector

Tests next league year projections:
- Expiring contracts come off the books
- Remaining cap hits escalate (taxi squad at 50%)
- Dead money and franchise tag commitments
- Minimum roster spend and discretionary spending
- Positional needs
- League roll-up feeding the free agent envelope
"""

import pytest
from salary_cap.league_envelope import compute_league_fa_envelope


def roster_player(player_id, position, salary, contract_years, status='ROSTER', franchise='0001'):
    return {
        'id': player_id,
        'position': position,
        'salary': salary,
        'contractYears': contract_years,
        'status': status,
        'franchiseId': franchise,
    }


class TestProjectTeam:
    """Test single-franchise projection."""

    def test_committed_salaries_and_space(self, team_cap_projector, sample_roster, test_franchise_id):
        """
        QB $8M × 3 → $8.8M, taxi WR $1M × 2 → $550K, IR RB expires.
        """
        situation = team_cap_projector.project_team(test_franchise_id, 'Test Team', sample_roster)

        assert situation.committed_salaries == 9_350_000
        assert situation.projected_cap_space == 45_000_000 - 9_350_000
        assert situation.roster_size == 2

    def test_expiring_contracts(self, team_cap_projector, sample_roster, test_franchise_id):
        situation = team_cap_projector.project_team(test_franchise_id, 'Test Team', sample_roster)

        assert [p.player_id for p in situation.expiring_contracts] == ['12625']
        assert situation.total_expiring_value == 4_000_000

    def test_dead_money_and_tag(self, team_cap_projector, sample_roster, test_franchise_id):
        situation = team_cap_projector.project_team(
            test_franchise_id,
            'Test Team',
            sample_roster,
            dead_money=1_000_000,
            franchise_tag_salary=6_000_000,
        )

        assert situation.projected_cap_space == 45_000_000 - 9_350_000 - 1_000_000 - 6_000_000
        assert situation.roster_size == 3
        assert situation.franchise_tag_commitment == 6_000_000

    def test_minimum_roster_spend(self, team_cap_projector, sample_roster, test_franchise_id):
        """2 players under contract → 18 spots at $425K."""
        situation = team_cap_projector.project_team(test_franchise_id, 'Test Team', sample_roster)

        assert situation.estimated_minimum_roster_spend == 18 * 425_000
        assert situation.discretionary_spending == pytest.approx(
            45_000_000 - 9_350_000 - 18 * 425_000
        )

    def test_discretionary_never_negative(self, team_cap_projector):
        roster = [roster_player('1', 'QB', 42_000_000, 3)]
        situation = team_cap_projector.project_team('0001', 'Capped Out', roster)

        assert situation.projected_cap_space < 0
        assert situation.discretionary_spending == 0

    def test_other_franchises_ignored(self, team_cap_projector, sample_roster, test_franchise_id):
        roster = sample_roster + [roster_player('99', 'TE', 5_000_000, 4, franchise='0002')]
        situation = team_cap_projector.project_team(test_franchise_id, 'Test Team', roster)

        assert situation.committed_salaries == 9_350_000

    def test_unowned_players_ignored(self, team_cap_projector, sample_roster, test_franchise_id):
        """Free agents without a franchise are never charged to a team."""
        free_agent = {'id': '77', 'position': 'RB', 'salary': 9_000_000, 'contractYears': 3}
        roster = sample_roster + [free_agent]

        situation = team_cap_projector.project_team(test_franchise_id, 'Test Team', roster)
        assert situation.committed_salaries == 9_350_000

        other = team_cap_projector.project_team('0002', 'Other Team', roster)
        assert other.committed_salaries == 0
        assert other.roster_size == 0

    def test_empty_roster(self, team_cap_projector):
        situation = team_cap_projector.project_team('0001', 'Expansion', [])

        assert situation.committed_salaries == 0
        assert situation.projected_cap_space == 45_000_000
        assert situation.roster_size == 0
        assert situation.estimated_minimum_roster_spend == 20 * 425_000


class TestPositionalNeeds:
    """Test positional depth analysis."""

    def test_needs_sorted_by_priority(self, team_cap_projector, sample_roster, test_franchise_id):
        situation = team_cap_projector.project_team(test_franchise_id, 'Test Team', sample_roster)
        needs = {need.position: need for need in situation.positional_needs}

        # Under contract next season: 1 QB, 1 WR
        assert needs['QB'].priority == 'medium'
        assert needs['RB'].priority == 'critical'
        assert needs['RB'].target_acquisitions == 6
        assert needs['WR'].current_depth == 1
        assert needs['WR'].priority == 'critical'
        assert needs['TE'].priority == 'critical'
        assert needs['PK'].priority == 'medium'

        priorities = [need.priority for need in situation.positional_needs]
        order = ['critical', 'high', 'medium', 'low']
        assert priorities == sorted(priorities, key=order.index)

    def test_full_depth_is_low_priority(self, team_cap_projector):
        roster = [roster_player(str(i), 'QB', 500_000, 2) for i in range(3)]
        assert len(team_cap_projector.analyze_positional_needs([])) == 6

        situation = team_cap_projector.project_team('0001', 'QB Heavy', roster)
        qb = next(n for n in situation.positional_needs if n.position == 'QB')
        assert qb.priority == 'low'
        assert qb.target_acquisitions == 0

    def test_kicker_alias(self, team_cap_projector):
        roster = [roster_player('1', 'K', 500_000, 2)]
        situation = team_cap_projector.project_team('0001', 'Kicker', roster)
        pk = next(n for n in situation.positional_needs if n.position == 'PK')
        assert pk.current_depth == 1
        assert pk.priority == 'low'


class TestProjectLeague:
    """Test league roll-up."""

    @pytest.fixture
    def league_roster(self):
        return [
            roster_player('1', 'QB', 10_000_000, 3, franchise='0001'),
            roster_player('2', 'WR', 2_000_000, 1, franchise='0001'),
            roster_player('3', 'RB', 20_000_000, 2, franchise='0002'),
        ]

    @pytest.fixture
    def teams(self):
        return [
            {'franchiseId': '0001', 'name': 'Alpha'},
            {'franchiseId': '0002', 'name': 'Bravo'},
        ]

    def test_team_situations(self, team_cap_projector, league_roster, teams):
        projection = team_cap_projector.project_league(
            league_roster, teams, {'0002': 2_000_000}
        )
        alpha, bravo = projection.team_situations

        assert alpha.team_name == 'Alpha'
        assert alpha.projected_cap_space == 45_000_000 - 11_000_000
        assert bravo.projected_cap_space == 45_000_000 - 22_000_000 - 2_000_000
        assert bravo.dead_money == 2_000_000

    def test_totals(self, team_cap_projector, league_roster, teams):
        projection = team_cap_projector.project_league(league_roster, teams)
        spend = 19 * 425_000

        alpha_discretionary = 34_000_000 - spend
        bravo_discretionary = 23_000_000 - spend
        assert projection.total_available_cap == alpha_discretionary + bravo_discretionary
        assert projection.average_cap_per_team == pytest.approx(
            (alpha_discretionary + bravo_discretionary) / 2
        )

    def test_empty_league(self, team_cap_projector):
        projection = team_cap_projector.project_league([], [])

        assert projection.team_situations == []
        assert projection.total_available_cap == 0
        assert projection.average_cap_per_team == 0

    def test_feeds_fa_envelope(self, team_cap_projector, league_roster, teams):
        projection = team_cap_projector.project_league(league_roster, teams)
        envelope = compute_league_fa_envelope(projection.team_situations)

        # Alpha: 34M - 5M reserve; Bravo: 23M - 5M reserve; 21 open slots each
        assert envelope.available_cap == 29_000_000 + 18_000_000
        assert envelope.open_slots == 42
        assert envelope.cap_per_open_slot == pytest.approx(47_000_000 / 42)
