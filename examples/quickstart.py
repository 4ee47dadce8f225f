from __future__ import annotations


def main() -> None:
    # [START README_QUICKSTART]
    from binomial_calculator import (
        MarketInputs,
        ReactiveStore,
        calculate_option_metrics,
        run_self_checks,
        validate_all,
    )
    from binomial_calculator.diagnostics import results_table
    from binomial_calculator.logging import configure_logging

    configure_logging(level="INFO")
    run_self_checks()

    inputs = MarketInputs(s0=40.0, su=56.0, sd=32.0, strike=50.0, risk_free_rate=5.0)
    print("Errors:", validate_all(inputs))

    res = calculate_option_metrics(inputs)
    print("Call:", res.C0, "Put:", res.P0, "p*:", res.p)
    print(results_table(inputs, res).to_string(index=False))

    store = ReactiveStore(inputs)
    store.subscribe(lambda state: print("result:", state.result, state.errors))
    store.update_calculations()
    store.on_input_changed("su", "30")  # below sd: result cleared, errors listed
    store.on_input_changed("su", "56")
    # [END README_QUICKSTART]


if __name__ == "__main__":
    main()
