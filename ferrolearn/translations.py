"""Interface strings for every supported language."""

from __future__ import annotations

from dataclasses import dataclass

from ferrolearn.locale import Locale

__all__ = ["TranslationSet", "get_translations"]


@dataclass(frozen=True, slots=True)
class TranslationSet:
    """Every interface string for one language."""

    # Navigation
    nav_dashboard: str
    nav_theory: str
    nav_practice: str
    nav_projects: str
    nav_settings: str
    # Dashboard
    dashboard_title: str
    dashboard_welcome: str
    dashboard_continue: str
    dashboard_progress: str
    # Theory
    theory_title: str
    theory_lessons: str
    # Practice
    practice_title: str
    practice_exercises: str
    # Projects
    projects_title: str
    # Settings
    settings_title: str
    settings_language: str
    settings_theme: str
    settings_rust_path: str
    # Common
    common_next: str
    common_previous: str
    common_run: str
    common_reset: str
    common_hint: str
    common_solution: str
    common_beginner: str
    common_intermediate: str
    common_advanced: str
    # Output panel
    output_title: str
    output_compiling: str
    output_compiling_running: str
    output_click_run: str
    # Success panel
    success_title: str
    success_compiled_ok: str
    success_exercise_passed: str
    success_exercise_failed: str
    success_expected: str
    success_got: str
    success_keep_going: str
    # Error explainer
    error_what: str
    error_why: str
    error_fix: str
    error_show_explanation: str
    error_hide_explanation: str
    # E0382 - use of moved value
    error_e0382_what: str
    error_e0382_why: str
    error_e0382_fix: str
    # E0502 - cannot borrow as mutable
    error_e0502_what: str
    error_e0502_why: str
    error_e0502_fix: str
    # E0308 - mismatched types
    error_e0308_what: str
    error_e0308_why: str
    error_e0308_fix: str
    # E0425 - cannot find value
    error_e0425_what: str
    error_e0425_why: str
    error_e0425_fix: str
    # E0384 - cannot assign twice to immutable variable
    error_e0384_what: str
    error_e0384_why: str
    error_e0384_fix: str
    # E0106 - missing lifetime specifier
    error_e0106_what: str
    error_e0106_why: str
    error_e0106_fix: str
    # Exercise types
    exercise_type_write_code: str
    exercise_type_fix_bug: str
    exercise_type_predict_output: str
    exercise_fix_instructions: str
    exercise_predict_instructions: str
    exercise_compiler_error: str
    exercise_predict_check: str
    exercise_predict_correct: str
    exercise_predict_incorrect: str
    exercise_predict_select: str
    exercise_expected_output: str
    exercise_show_hint: str
    # Learning path / prerequisites
    path_locked: str
    path_prerequisites: str
    path_complete_first: str
    path_recommended_next: str
    path_all_completed: str
    # Playground
    playground_title: str
    playground_clear: str
    playground_tooltip: str
    playground_clippy: str
    playground_mode_remote: str
    playground_mode_local: str
    playground_no_rust_hint: str


_EN = TranslationSet(
    nav_dashboard="Dashboard",
    nav_theory="Theory",
    nav_practice="Practice",
    nav_projects="Projects",
    nav_settings="Settings",
    dashboard_title="Welcome to Rust for Everyone",
    dashboard_welcome="Learn Rust interactively",
    dashboard_continue="Continue learning",
    dashboard_progress="Your progress",
    theory_title="Theory Modules",
    theory_lessons="lessons",
    practice_title="Practice Exercises",
    practice_exercises="exercises",
    projects_title="Guided Projects",
    settings_title="Settings",
    settings_language="Language",
    settings_theme="Theme",
    settings_rust_path="Rust Path",
    common_next="Next",
    common_previous="Previous",
    common_run="Run",
    common_reset="Reset",
    common_hint="Hint",
    common_solution="Solution",
    common_beginner="Beginner",
    common_intermediate="Intermediate",
    common_advanced="Advanced",
    output_title="Output",
    output_compiling="Compiling...",
    output_compiling_running="Compiling and running...",
    output_click_run="Click Run to execute your code",
    success_title="Success!",
    success_compiled_ok="Your code compiled and ran successfully!",
    success_exercise_passed="Output matches expected! Exercise completed!",
    success_exercise_failed="Output doesn't match expected.",
    success_expected="Expected",
    success_got="Got",
    success_keep_going="Great job! Keep going!",
    error_what="What this error means",
    error_why="Why Rust prevents this",
    error_fix="How to fix it",
    error_show_explanation="Show explanation",
    error_hide_explanation="Hide explanation",
    error_e0382_what=(
        "You tried to use a variable after its value was moved to another variable. "
        "In Rust, each value has exactly one owner. When you assign a value to a new "
        "variable or pass it to a function, the original variable can no longer be used."
    ),
    error_e0382_why=(
        "Rust's ownership system prevents use-after-free bugs. If two variables could "
        "use the same heap data, one might free it while the other still references it, "
        "causing crashes or security vulnerabilities."
    ),
    error_e0382_fix=(
        "You can: (1) Clone the value with .clone() if you need two copies, (2) Use a "
        "reference (&value) to borrow instead of moving, or (3) Restructure your code so "
        "the value is only used in one place."
    ),
    error_e0502_what=(
        "You tried to borrow a value as immutable (&) while it's already borrowed as "
        "mutable (&mut), or vice versa. Rust doesn't allow mixing mutable and immutable "
        "borrows at the same time."
    ),
    error_e0502_why=(
        "If you could read a value while something else is changing it, you might see "
        "inconsistent or partially updated data. This rule prevents data races and "
        "ensures references always point to valid data."
    ),
    error_e0502_fix=(
        "You can: (1) Finish using the mutable borrow before creating an immutable one, "
        "(2) Use separate scopes with {} to limit borrow lifetimes, or (3) Consider using "
        "Cell or RefCell for interior mutability."
    ),
    error_e0308_what=(
        "The compiler expected one type but found a different one. For example, a "
        "function expects an i32 but you passed a String, or a variable was declared as "
        "one type but assigned a different type."
    ),
    error_e0308_why=(
        "Rust's strong type system catches type errors at compile time rather than at "
        "runtime. This prevents bugs that would be hard to find later, like accidentally "
        "treating text as a number."
    ),
    error_e0308_fix=(
        "You can: (1) Change the value to match the expected type, (2) Use type "
        "conversion like .into(), as, or parse(), (3) Fix the function signature or "
        "variable annotation to match what you actually want."
    ),
    error_e0425_what=(
        "You used a variable or function name that the compiler can't find in the "
        "current scope. This usually means the name is misspelled, not yet declared, or "
        "declared in a different scope."
    ),
    error_e0425_why=(
        "Rust requires all names to be defined before use. This catches typos and "
        "ensures you're referencing something that actually exists, preventing runtime "
        "errors from undefined variables."
    ),
    error_e0425_fix=(
        "You can: (1) Check for typos in the variable name, (2) Make sure the variable "
        "is declared before it's used, (3) Check if the variable is defined inside a "
        "different block {} and move it to the right scope, or (4) Import the name with "
        "'use' if it's from another module."
    ),
    error_e0384_what=(
        "You tried to change the value of a variable that wasn't declared as mutable. "
        "In Rust, variables are immutable by default -- you can't change them once "
        "assigned."
    ),
    error_e0384_why=(
        "Immutable variables prevent accidental changes to data. When you see a "
        "variable without 'mut', you know its value won't change, making the code easier "
        "to reason about and less prone to bugs."
    ),
    error_e0384_fix=(
        "Add 'mut' to the variable declaration: change 'let x = 5;' to 'let mut x = 5;'. "
        "Only add mut if you truly need to change the value -- keeping variables "
        "immutable when possible is good practice."
    ),
    error_e0106_what=(
        "A function or struct that uses references (&) is missing a lifetime "
        "annotation. Rust needs to know how long each reference is valid to ensure "
        "memory safety."
    ),
    error_e0106_why=(
        "Lifetimes tell Rust how long a reference stays valid. Without them, the "
        "compiler can't verify that references don't outlive the data they point to, "
        "which could lead to dangling references."
    ),
    error_e0106_fix=(
        "You can: (1) Add lifetime annotations like <'a> to your function or struct, "
        "(2) Use owned types (String instead of &str) to avoid references entirely, or "
        "(3) Let the compiler's lifetime elision rules handle it by simplifying your "
        "function signature."
    ),
    exercise_type_write_code="Write Code",
    exercise_type_fix_bug="Fix the Bug",
    exercise_type_predict_output="Predict Output",
    exercise_fix_instructions=(
        "This code has a bug. Read the compiler error message and fix the code so it "
        "compiles and produces the expected output."
    ),
    exercise_predict_instructions=(
        "Look at the following code. Without running it, predict what the output will "
        "be. Then verify your answer."
    ),
    exercise_compiler_error="Compiler error",
    exercise_predict_check="Check answer",
    exercise_predict_correct="Correct! Your prediction was right.",
    exercise_predict_incorrect="Incorrect. Run the code to see the actual output.",
    exercise_predict_select="Select your prediction:",
    exercise_expected_output="Expected output:",
    exercise_show_hint="Show hint",
    path_locked="Locked",
    path_prerequisites="Prerequisites",
    path_complete_first="Complete these first",
    path_recommended_next="Recommended Next",
    path_all_completed="All content completed! Great job!",
    playground_title="Rust Playground",
    playground_clear="Clear",
    playground_tooltip="Playground",
    playground_clippy="Clippy",
    playground_mode_remote="Remote",
    playground_mode_local="Local",
    playground_no_rust_hint=(
        "No Rust installed and no internet. Install Rust from rustup.rs or check your "
        "connection."
    ),
)

_ES = TranslationSet(
    nav_dashboard="Inicio",
    nav_theory="Teoría",
    nav_practice="Práctica",
    nav_projects="Proyectos",
    nav_settings="Configuración",
    dashboard_title="Bienvenido a Rust for Everyone",
    dashboard_welcome="Aprende Rust de forma interactiva",
    dashboard_continue="Continuar aprendiendo",
    dashboard_progress="Tu progreso",
    theory_title="Módulos de Teoría",
    theory_lessons="lecciones",
    practice_title="Ejercicios de Práctica",
    practice_exercises="ejercicios",
    projects_title="Proyectos Guiados",
    settings_title="Configuración",
    settings_language="Idioma",
    settings_theme="Tema",
    settings_rust_path="Ruta de Rust",
    common_next="Siguiente",
    common_previous="Anterior",
    common_run="Ejecutar",
    common_reset="Reiniciar",
    common_hint="Pista",
    common_solution="Solución",
    common_beginner="Principiante",
    common_intermediate="Intermedio",
    common_advanced="Avanzado",
    output_title="Salida",
    output_compiling="Compilando...",
    output_compiling_running="Compilando y ejecutando...",
    output_click_run="Haz clic en Ejecutar para ver la salida",
    success_title="Resultado",
    success_compiled_ok="Compilado correctamente",
    success_exercise_passed="Ejercicio completado!",
    success_exercise_failed="Salida incorrecta",
    success_expected="Esperado",
    success_got="Obtenido",
    success_keep_going="Sigue practicando!",
    error_what="Que significa",
    error_why="Por que ocurre",
    error_fix="Como solucionarlo",
    error_show_explanation="Mostrar explicacion",
    error_hide_explanation="Ocultar explicacion",
    error_e0382_what="Estas intentando usar un valor que ya fue movido a otra variable.",
    error_e0382_why=(
        "En Rust, cuando asignas un valor a otra variable, el valor se 'mueve' y la "
        "variable original ya no es valida. Esto es parte del sistema de ownership."
    ),
    error_e0382_fix=(
        "Usa .clone() para crear una copia, o usa referencias (&) en lugar de mover el "
        "valor."
    ),
    error_e0502_what=(
        "Estas intentando crear una referencia mutable mientras existe una referencia "
        "inmutable."
    ),
    error_e0502_why=(
        "Rust no permite tener referencias mutables e inmutables al mismo tiempo para "
        "prevenir data races."
    ),
    error_e0502_fix=(
        "Asegurate de que las referencias inmutables ya no se usen antes de crear una "
        "referencia mutable."
    ),
    error_e0308_what="Los tipos no coinciden. Rust esperaba un tipo pero encontro otro.",
    error_e0308_why=(
        "Rust es estrictamente tipado. Cada expresion debe tener el tipo correcto."
    ),
    error_e0308_fix=(
        "Verifica los tipos de tus variables y expresiones. Puede que necesites una "
        "conversion explicita."
    ),
    error_e0425_what="Rust no puede encontrar la variable o funcion que mencionas.",
    error_e0425_why=(
        "La variable no fue declarada, o esta fuera de alcance, o tiene un error de "
        "escritura."
    ),
    error_e0425_fix=(
        "Verifica que la variable este declarada con 'let' y que el nombre este bien "
        "escrito."
    ),
    error_e0384_what="Estas intentando modificar una variable que no es mutable.",
    error_e0384_why=(
        "En Rust, las variables son inmutables por defecto. No puedes cambiar su valor "
        "una vez asignado."
    ),
    error_e0384_fix="Agrega 'mut' a la declaracion: let mut variable = valor;",
    error_e0106_what="Falta un especificador de lifetime en una referencia.",
    error_e0106_why=(
        "Rust necesita saber cuanto tiempo vive una referencia para garantizar "
        "seguridad de memoria."
    ),
    error_e0106_fix=(
        "Agrega un lifetime explicito como 'a o considera usar tipos con propiedad "
        "(owned types) en su lugar."
    ),
    exercise_type_write_code="Escribir Codigo",
    exercise_type_fix_bug="Corregir Error",
    exercise_type_predict_output="Predecir Salida",
    exercise_fix_instructions=(
        "Este codigo tiene un error. Lee el mensaje del compilador y corrige el codigo "
        "para que compile y produzca la salida esperada."
    ),
    exercise_predict_instructions=(
        "Observa el siguiente codigo. Sin ejecutarlo, predice cual sera la salida. "
        "Luego verifica tu respuesta."
    ),
    exercise_compiler_error="Error del compilador",
    exercise_predict_check="Verificar respuesta",
    exercise_predict_correct="Correcto! Tu prediccion fue acertada.",
    exercise_predict_incorrect="Incorrecto. Ejecuta el codigo para ver la salida real.",
    exercise_predict_select="Selecciona tu prediccion:",
    exercise_expected_output="Salida esperada:",
    exercise_show_hint="Mostrar pista",
    path_locked="Bloqueado",
    path_prerequisites="Requisitos previos",
    path_complete_first="Completa estos primero",
    path_recommended_next="Siguiente recomendado",
    path_all_completed="Todo el contenido completado! Excelente!",
    playground_title="Rust Playground",
    playground_clear="Limpiar",
    playground_tooltip="Playground",
    playground_clippy="Clippy",
    playground_mode_remote="Remoto",
    playground_mode_local="Local",
    playground_no_rust_hint=(
        "Rust no esta instalado y no hay internet. Instala Rust desde rustup.rs o "
        "verifica tu conexion."
    ),
)

_BY_LOCALE = {
    Locale.ES: _ES,
    Locale.EN: _EN,
}


def get_translations(locale: Locale | str) -> TranslationSet:
    """Return the strings for ``locale``; a locale code such as ``"en"`` is accepted.

    Raises ValueError for an unknown locale.
    """
    return _BY_LOCALE[Locale(locale)]