import pytest

from lesson_parser.parser import clear_cache

SAMPLE_LESSON = """# Exploring Fractions

## Lesson Overview
**Subject:** Mathematics
**Year Group:** Year 4
**Duration:** 60 minutes

A hands-on introduction to equivalent fractions.

## Learning Objectives
1. Recognise equivalent fractions
2. Compare fractions with the same denominator
3. **Explain** reasoning using diagrams

## Initial Discussion Prompts
- Where do we see halves in everyday life?
- Is one half of a pizza always the same size?
- How could we share 3 cakes between 4 people?

## Lesson Options
Choose one of the following approaches.

## Option 1: Fraction Walls
Pupils build fraction walls from paper strips.

## Option 2: Pizza Problems
Pupils solve sharing problems with paper pizzas.

## Option 3: Fraction Hunt
Pupils find fractions around the classroom.

## Assessment Questions
1. What is another fraction equal to 1/2?
2. Which is bigger, 2/5 or 3/5?

## Differentiation & SEN Support
**Support**
- Provide pre-cut fraction strips
- Pair with a buddy
**Core**: Complete the fraction wall independently
**Extension**: Find three fractions equal to 3/4

## Cross-Curricular Links
- **Art**: Design a fraction mosaic
- **Science**: Measure liquids in fractions of a litre
  using measuring jugs
- **Design & Technology**: Cut materials into equal parts

## Additional Notes
- Prepare paper strips in advance

## Reflection Suggestions
- Which activity helped pupils most?
- What misconceptions came up?
"""


@pytest.fixture
def sample_lesson():
    return SAMPLE_LESSON


@pytest.fixture(autouse=True)
def _fresh_cache():
    clear_cache()
    yield
    clear_cache()
