"""
Timeline Templates

Pre-built production schedules for common baking workflows. Each step is
placed by its offset in minutes from the bake start: negative offsets are
before the bake, positive offsets after.
"""

from models.timeline import TimelineTemplate, TimelineTemplateStep

# Step type tags used by the templates
STEP_TYPES = {'prep', 'mix', 'ferment', 'fold', 'shape', 'proof', 'bake', 'cool'}


STANDARD_SOURDOUGH = TimelineTemplate(
    id='standard_sourdough',
    name='Standard Country Sourdough',
    description=(
        'A classic overnight sourdough with a long cold proof. Plan for about '
        '24 hours from levain build to the finished loaf.'
    ),
    steps=(
        TimelineTemplateStep(
            'prep', 'Levain build', -1440, 720,
            'Build levain with 1:5:5 ratio (starter : flour : water). Maintain at 78°F '
            'until doubled and domed, roughly 8-12 hours.',
        ),
        TimelineTemplateStep(
            'prep', 'Autolyse', -1050, 30,
            'Combine flour and water (no salt, no levain). Mix until no dry flour remains '
            'and let rest covered.',
        ),
        TimelineTemplateStep(
            'mix', 'Mix', -1020, 15,
            'Add levain and salt to the autolysed dough. Mix by hand using pinch-and-fold '
            'until fully incorporated.',
        ),
        TimelineTemplateStep(
            'ferment', 'Bulk ferment', -1005, 240,
            'Maintain dough at 78°F. Perform stretch-and-fold sets every 30-45 minutes for '
            'the first 2 hours, then let rest. Target 50-75% volume increase.',
        ),
        TimelineTemplateStep(
            'fold', 'Fold 1', -945, 5,
            'Perform a set of stretch-and-folds (4 sides) to develop gluten structure.',
        ),
        TimelineTemplateStep(
            'fold', 'Fold 2', -885, 5,
            'Perform a second set of stretch-and-folds to further strengthen the dough.',
        ),
        TimelineTemplateStep(
            'fold', 'Fold 3', -825, 5,
            'Perform a third set of stretch-and-folds. Dough should feel noticeably more elastic.',
        ),
        TimelineTemplateStep(
            'shape', 'Shape', -765, 15,
            'Pre-shape into a round, bench rest 15-20 minutes, then final shape into a boule '
            'or batard. Place seam-side up in a floured banneton.',
        ),
        TimelineTemplateStep(
            'proof', 'Cold proof', -750, 660,
            'Refrigerate at 38°F for 10-12 hours. The long cold retard develops flavor and '
            'makes scoring easier.',
        ),
        TimelineTemplateStep(
            'prep', 'Preheat', -90, 60,
            'Preheat oven to 500°F with Dutch oven inside. Allow at least 60 minutes for the '
            'Dutch oven to fully saturate with heat.',
        ),
        TimelineTemplateStep(
            'prep', 'Score', -30, 5,
            'Invert dough onto parchment, score with a lame or razor blade. Use swift, '
            'confident strokes at a shallow angle.',
        ),
        TimelineTemplateStep(
            'bake', 'Bake (covered)', 0, 20,
            'Bake at 500°F covered in the Dutch oven. The trapped steam creates an initial '
            'oven spring and crisp crust.',
        ),
        TimelineTemplateStep(
            'bake', 'Bake (uncovered)', 20, 25,
            'Remove lid, reduce temperature to 450°F. Bake until deep golden brown and the '
            'internal temperature reaches 205-210°F.',
        ),
        TimelineTemplateStep(
            'cool', 'Cool', 45, 60,
            'Cool on wire rack for at least 1 hour before slicing. Cutting too early releases '
            'steam and can result in a gummy crumb.',
        ),
    ),
)


ENRICHED_DOUGH = TimelineTemplate(
    id='enriched_dough',
    name='Enriched Dough',
    description=(
        'A versatile enriched dough suitable for brioche, babka, cinnamon rolls, and '
        'similar pastries. Includes an overnight cold proof for easier handling.'
    ),
    steps=(
        TimelineTemplateStep(
            'mix', 'Mix', -720, 20,
            'Combine flour, sugar, eggs, yeast, and salt. Mix on low speed, then gradually '
            'incorporate softened butter. Mix on medium until windowpane.',
        ),
        TimelineTemplateStep(
            'ferment', 'Bulk ferment', -700, 120,
            'Let dough rise at room temperature (75-78°F) until roughly doubled, about '
            '1.5-2 hours.',
        ),
        TimelineTemplateStep(
            'shape', 'Shape', -580, 15,
            'Turn out dough, degas gently, and shape as needed (rolls, braid, etc.). Place '
            'in prepared pans.',
        ),
        TimelineTemplateStep(
            'proof', 'Cold proof', -565, 480,
            'Cover and refrigerate for 8 hours or overnight. This slow proof deepens flavor '
            'and firms the butter for easier handling.',
        ),
        TimelineTemplateStep(
            'prep', 'Preheat', -85, 30,
            "Preheat oven to the recipe's specified temperature (typically 350-375°F for "
            'enriched doughs).',
        ),
        TimelineTemplateStep(
            'proof', 'Proof (room temp)', -55, 45,
            'Remove from refrigerator and let proof at room temperature until puffy and '
            'nearly doubled, about 45-60 minutes.',
        ),
        TimelineTemplateStep(
            'bake', 'Bake', 0, 30,
            'Bake until golden brown and internal temperature reaches 190°F. Tent with foil '
            'if browning too quickly.',
        ),
        TimelineTemplateStep(
            'cool', 'Cool', 30, 30,
            'Cool in pan for 10 minutes, then transfer to a wire rack. Apply glaze or icing '
            'while slightly warm if desired.',
        ),
    ),
)


SAME_DAY_SOURDOUGH = TimelineTemplate(
    id='same_day_sourdough',
    name='Same Day Sourdough',
    description=(
        'A faster sourdough schedule that completes in about 10-12 hours with no '
        'overnight retard. Best in warm weather or with a proofing box.'
    ),
    steps=(
        TimelineTemplateStep(
            'prep', 'Levain build', -600, 240,
            'Build a stiff or liquid levain using a higher inoculation ratio (1:3:3 or '
            '1:2:2). Keep warm (80-82°F) to speed fermentation. Ready in 3-4 hours.',
        ),
        TimelineTemplateStep(
            'prep', 'Autolyse', -360, 30,
            'Mix flour and water until just combined. Rest covered for 30 minutes to hydrate '
            'the flour and begin gluten development.',
        ),
        TimelineTemplateStep(
            'mix', 'Mix', -330, 15,
            'Add ripe levain and salt to the autolysed dough. Mix thoroughly by hand until '
            'the dough is cohesive.',
        ),
        TimelineTemplateStep(
            'ferment', 'Bulk ferment', -315, 240,
            'Maintain at 80-82°F with stretch-and-folds every 30 minutes for the first 2 '
            'hours. Dough should increase 50-75% in volume.',
        ),
        TimelineTemplateStep(
            'shape', 'Shape', -75, 15,
            'Pre-shape, rest 15 minutes, then final shape. Place in banneton.',
        ),
        TimelineTemplateStep(
            'proof', 'Proof', -60, 45,
            'Proof at room temperature until the dough passes the poke test (slow '
            'spring-back, slight indent remains).',
        ),
        TimelineTemplateStep(
            'prep', 'Preheat', -60, 45,
            'Preheat oven to 500°F with Dutch oven inside. Start preheating at the same '
            'time as the proof begins.',
        ),
        TimelineTemplateStep(
            'prep', 'Score', -15, 5,
            'Turn out dough, score decisively, and load into the hot Dutch oven.',
        ),
        TimelineTemplateStep(
            'bake', 'Bake', 0, 45,
            'Bake covered at 500°F for 20 minutes, then remove lid and reduce to 450°F for '
            'another 20-25 minutes until deeply golden.',
        ),
        TimelineTemplateStep(
            'cool', 'Cool', 45, 60,
            'Cool completely on a wire rack before slicing, at least 1 hour.',
        ),
    ),
)


def check_step_types(templates):
    """Raise ValueError if any template step uses a type outside STEP_TYPES."""
    for template in templates:
        for step in template.steps:
            if step.step_type not in STEP_TYPES:
                raise ValueError(
                    f"Template '{template.id}' step '{step.name}' has unknown type '{step.step_type}'"
                )


# Declaration order is the order templates are listed in
TIMELINE_TEMPLATES = (STANDARD_SOURDOUGH, ENRICHED_DOUGH, SAME_DAY_SOURDOUGH)

check_step_types(TIMELINE_TEMPLATES)
