from minic.minic_lexer import tokenize
from minic.minic_parser import Parser
from minic.minic_printer import render_tokens, render_tree


def handle_command(src: str, state: dict[str, bool]) -> bool:
    """Handles REPL meta commands. Returns True if `src` was one."""
    if src.lower() == "verbose-mode":
        state["verbose"] = not state["verbose"]
        print(f"[mode] >>> Verbose mode {'ON' if state['verbose'] else 'OFF'}")
        return True
    return False


def run_statement(src: str, verbose: bool = False) -> bool:
    tokens = tokenize(src)
    if verbose:
        print("[tokens] >>>")
        print(render_tokens(tokens))

    result = Parser(tokens).parse()
    if not result:
        print(f"[error] >>> {result.message}")
        return False
    print(render_tree(result.unwrap()))
    return True


def start_repl(verbose: bool = False) -> None:
    print("minic REPL. Type 'exit' or 'quit' to leave.")
    state = {"verbose": verbose}

    while True:
        try:
            src_lines: list[str] = []
            while True:
                prompt = ">>> " if not src_lines else "... "
                line = input(prompt)
                if line.strip() in ("exit", "quit") and not src_lines:
                    print("Exiting minic REPL.")
                    return
                src_lines.append(line)
                stripped = line.strip()
                # a statement ends at its semicolon; blank lines end it early
                if ";" in stripped or not stripped:
                    break
                if len(src_lines) == 1 and (
                    stripped.startswith("//") or stripped.lower() == "verbose-mode"
                ):
                    break
            src = "\n".join(src_lines).strip()
            if not src:
                continue
            if src.startswith("//"):
                continue
            if handle_command(src, state):
                continue
            run_statement(src, verbose=state["verbose"])

        except (KeyboardInterrupt, EOFError):
            print("\nExiting minic REPL.")
            break


def main() -> None:
    start_repl()


if __name__ == "__main__":
    main()
