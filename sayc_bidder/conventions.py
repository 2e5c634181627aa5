"""
Convention Catalog
Nested enable/parameter tree consulted by the matchers and decision rules

Layout: category -> convention -> {'enabled': bool, param: value, ...}, plus
a flat 'general' category of system-wide switches. Lookups never raise; a
missing entry reads as disabled / the caller's default.
"""

import copy
import logging

logger = logging.getLogger(__name__)

DEFAULT_CONVENTIONS = {
    'opening_bids': {
        'strong_2_clubs': {'enabled': True, 'min_hcp': 22},
    },
    'preempts': {
        'weak_two': {'enabled': True, 'min_hcp': 5, 'max_hcp': 11},
        'three_level': {'enabled': True, 'min_hcp': 5, 'max_hcp': 10},
    },
    'ace_asking': {
        'gerber': {
            'enabled': True,
            'continuations': True,
            'responses_map': ['4D', '4H', '4S', '4NT'],
        },
        'blackwood': {
            'enabled': True,
            'variant': 'rkcb',
            'responses': '1430',
        },
    },
    'notrump_defenses': {
        'dont': {'enabled': True, 'style': 'standard'},
        'unusual_nt': {'enabled': True, 'direct': True, 'passed_hand': False, 'over_minors': False},
        'lebensohl': {'enabled': True, 'after_interference': True, 'fast_denies': True},
    },
    'notrump_responses': {
        'stayman': {'enabled': True},
        'jacoby_transfers': {'enabled': True},
        'texas_transfers': {'enabled': True},
        'minor_suit_transfers': {'enabled': False},
    },
    'responses': {
        'jacoby_2nt': {'enabled': True},
        'splinter_bids': {'enabled': True},
        'bergen_raises': {'enabled': False},
        'drury': {'enabled': True},
    },
    'competitive': {
        'overcalls': {'enabled': True, 'one_level_min_hcp': 8, 'two_level_min_hcp': 10, 'max_hcp': 16},
        'takeout_doubles': {'enabled': True, 'min_hcp': 12},
        'michaels': {'enabled': True, 'strength': 'wide_range', 'direct_only': True},
        'responsive_doubles': {'enabled': True, 'thru_level': 3, 'min_strength': 8},
        'negative_doubles': {'enabled': True, 'thru_level': 3, 'min_hcp': 6},
        'support_doubles': {'enabled': True, 'thru': '2S'},
        'cue_bid_raises': {'enabled': True},
        'reopening_doubles': {'enabled': True, 'min_hcp': 8},
        'advancer_raises': {
            'enabled': True,
            'simple_min_support': 3,
            'simple_range': {'min': 6, 'max': 10},
            'jump_min_support': 4,
            'jump_range': {'min': 11, 'max': 12},
            'cuebid_min_support': 3,
            'cuebid_min_hcp': 13,
        },
    },
    'strong_club_defenses': {
        'meckwell': {'enabled': True, 'style': 'standard'},
    },
    'general': {
        'vulnerability_adjustments': True,
        'passed_hand_variations': True,
        'relaxed_takeout_doubles': True,
        # classic: 1NT 6-11, 2NT 12-14, 3NT 15-17; modern: 1NT 6-10, 2NT 11-12, 3NT 13-15
        'nt_over_minors_range': 'classic',
        'balanced_shapes': {'include_5422': False},
        'systems_on_over_1nt_interference': {
            'stayman': False,
            'transfers': False,
            'stolen_bid_double': False,
        },
    },
}

# (favourable, unfavourable) point adjustments to the minimum strength
VULNERABILITY_ADJUSTMENTS = {
    'overcall': (-1, 1),
    'preempt': (-2, 2),
    'weak_two': (-1, 4),
}


def _deep_merge(base, overrides):
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _deep_merge(base[key], value)
        else:
            base[key] = copy.deepcopy(value)
    return base


class ConventionCatalog:
    """
    Read-mostly convention configuration shared across decisions.

    Mutate only between decisions; concurrent readers are safe, concurrent
    writers must be serialized by the host application.
    """

    def __init__(self, config=None):
        self.config = copy.deepcopy(DEFAULT_CONVENTIONS)
        if config:
            _deep_merge(self.config, config)

    def _entry(self, name, category=None):
        """Locate a convention entry, searching every category when none is given"""
        if category is not None:
            section = self.config.get(category)
            entry = section.get(name) if isinstance(section, dict) else None
            return entry if isinstance(entry, dict) else None
        for cat, section in self.config.items():
            if cat == 'general' or not isinstance(section, dict):
                continue
            entry = section.get(name)
            if isinstance(entry, dict):
                return entry
        return None

    def is_enabled(self, name, category=None):
        """True when the named convention exists and is enabled"""
        entry = self._entry(name, category)
        if entry is None:
            logger.debug(f"Convention {category or '*'}.{name} not configured; treating as disabled")
            return False
        return bool(entry.get('enabled', False))

    def get_setting(self, name, key, category=None, default=None):
        """Parameter of a convention, or `default` when missing"""
        entry = self._entry(name, category)
        if entry is None or key not in entry:
            logger.debug(f"Setting {name}.{key} not configured; using {default!r}")
            return default
        return entry[key]

    def get_general(self, key, default=None):
        """System-wide switch; dotted keys reach nested values ('balanced_shapes.include_5422')"""
        node = self.config.get('general', {})
        for part in key.split('.'):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def categories(self):
        return list(self.config)

    def as_dict(self):
        return copy.deepcopy(self.config)

    def enable(self, name, category=None):
        self.configure(name, category, enabled=True)

    def disable(self, name, category=None):
        self.configure(name, category, enabled=False)

    def configure(self, name, category=None, **params):
        """Update a convention's parameters; unknown conventions need a category"""
        entry = self._entry(name, category)
        if entry is None:
            if category is None:
                raise KeyError(f"Unknown convention {name!r}; pass a category to create it")
            entry = self.config.setdefault(category, {}).setdefault(name, {'enabled': False})
        entry.update(copy.deepcopy(params))

    def set_general(self, key, value):
        node = self.config.setdefault('general', {})
        parts = key.split('.')
        for part in parts[:-1]:
            node = node.setdefault(part, {})
        node[parts[-1]] = value

    def update(self, overrides):
        """Deep-merge a nested override mapping"""
        _deep_merge(self.config, overrides)

    def vulnerability_adjustment(self, kind, vulnerability):
        """Points added to a minimum for `kind` ('overcall', 'preempt', 'weak_two')"""
        if not self.get_general('vulnerability_adjustments', False) or vulnerability is None:
            return 0
        favourable, unfavourable = VULNERABILITY_ADJUSTMENTS.get(kind, (0, 0))
        if vulnerability.favourable:
            return favourable
        if vulnerability.unfavourable:
            return unfavourable
        return 0
